from context7_mcporter.cli.cmds.lookup_cmds import register_lookup

__all__ = ["register_lookup"]
