from loteria.loader.yaml_loader import dump_games, parse_games_yaml, restore_games

__all__ = ["dump_games", "parse_games_yaml", "restore_games"]
