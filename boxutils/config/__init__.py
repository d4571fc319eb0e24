from .box_config import get_default_config, load_config

__all__ = ['get_default_config', 'load_config']
