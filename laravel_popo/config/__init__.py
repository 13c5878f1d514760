from .popo import get_popo_config

__all__ = ["get_popo_config"]
