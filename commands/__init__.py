# ═══════════════════════════════════════════════════════════════════
# commands/__init__.py - Shared references for command modules
# ═══════════════════════════════════════════════════════════════════

# Global references that all command modules can access
cfg = None
repo = None
settings = None
trade_ops = None

def set_globals(config):
    """Build the stores from config and hand them to every command module"""
    global cfg, repo, settings, trade_ops

    from persistence import TradeRepository, SettingsStore
    from trade_operations import TradeOperations

    cfg = config
    repo = TradeRepository(cfg["storage"]["trades_file"])
    settings = SettingsStore(cfg["storage"]["settings_file"])
    trade_ops = TradeOperations(repo)

    # Command modules import these names at load time, so rebind them there too
    import commands.trade_commands
    import commands.analysis_commands
    import commands.management_commands
    import commands.settings_commands

    commands.trade_commands.cfg = cfg
    commands.trade_commands.repo = repo
    commands.trade_commands.trade_ops = trade_ops

    commands.analysis_commands.cfg = cfg
    commands.analysis_commands.repo = repo
    commands.analysis_commands.settings = settings

    commands.management_commands.cfg = cfg
    commands.management_commands.repo = repo

    commands.settings_commands.settings = settings
