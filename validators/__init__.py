from validators.config import check_config, ConfigReport

__all__ = ["check_config", "ConfigReport"]
