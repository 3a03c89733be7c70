import copy
import json
import os

try:
    import tomllib

    HAS_TOMLLIB = True
except ImportError:
    HAS_TOMLLIB = False

from xkeys.params import get_params
from xkeys.primitives import check_hint

DEFAULT_CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".xkeys")

LOG_LEVELS = ("trace", "debug", "info", "warning", "error", "critical")


class Config(object):
    """
    Library defaults

    Attributes:
        log_level: str, level of the handler installed by init_logging
        network: str, network of get_encoder() when none is named
        hint: str, hint of root_from_seed when none is given
    """

    def __init__(self, **kwargs):
        self.log_level = kwargs.get("log_level", "error")
        self.network = kwargs.get("network", "mainnet")
        self.hint = kwargs.get("hint", "legacy")

        if self.log_level.lower() not in LOG_LEVELS:
            raise ValueError(f"unrecognized log_level: {self.log_level}")
        get_params(self.network)
        check_hint(self.hint)

    def load_config(self, config_dir: str = DEFAULT_CONFIG_DIR):
        """
        Look for config.toml, then config.json, in config_dir and load, if present
        """
        toml_path = os.path.join(config_dir, "config.toml")
        json_path = os.path.join(config_dir, "config.json")
        if HAS_TOMLLIB and os.path.exists(toml_path):
            with open(toml_path, "rb") as config_file:
                config_file_dict = tomllib.load(config_file)
        elif os.path.exists(json_path):
            with open(json_path) as config_file:
                config_file_dict = json.load(config_file)
        else:
            config_file_dict = {}

        if config_file_dict:
            self.update(**config_file_dict)

    def update(self, **kwargs):
        """
        Update Config with kwargs

        Keys not defined in __init__ are dropped by re-instantiating
        """
        updated_attrs = copy.deepcopy(vars(self))
        updated_attrs.update(kwargs)
        self.__init__(**updated_attrs)


config = Config()
