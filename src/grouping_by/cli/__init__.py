from grouping_by.cli.cmds import app

__all__ = ["app"]
