from __future__ import annotations
from functools import lru_cache
from typing import Any, Dict

from mrelbp.main.descriptors.parameters import Parameters
from mrelbp.main.utils.config_loader import load_descriptor_settings


@lru_cache(maxsize=1)
def get_settings() -> Dict[str, Any]:
    # defaults merged with $MRELBP_CONFIG_PATH when set
    return load_descriptor_settings()


def get_parameters() -> Parameters:
    return Parameters.from_config(get_settings())
