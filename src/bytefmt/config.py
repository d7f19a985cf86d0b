"""
define configurations

A configuration holds the unit name table and the default directive
used by byte2human.  It can be given as a mapping, as the name of one
of the presets below, or as the path of a YAML file, e.g.

   names: [B, KiB, MiB, GiB, TiB, PiB, EiB]
   directive: "% .1f"
"""

from collections import OrderedDict
from collections.abc import Mapping
from pathlib import Path

import yaml

from .directive import Directive
from .util import _names, normalize_names


class Config(object):
    def __init__(self, config=None, /, **kwargs):
        if isinstance(config, Config):
            config = config._config
        if isinstance(config, Path):
            config = str(config)
        if config is not None:
            if isinstance(config, str):
                if config.endswith((".yaml", ".yml")):
                    try:
                        with open(config, "rt") as f:
                            data = f.read()
                        data = yaml.safe_load(data)
                    except (OSError, yaml.YAMLError) as e:
                        raise AttributeError(f'Could not load "{config}".') from e
                    if not isinstance(data, Mapping):
                        raise AttributeError(f'No configuration found in "{config}".')
                    config = data
                else:
                    try:
                        config = _presets[config]
                    except KeyError:
                        raise AttributeError(
                            f'Unknown configuration "{config}".'
                        ) from None
            self._config = OrderedDict(config)
        else:
            self._config = OrderedDict()
        self._config.update(kwargs)

        # some defaults
        names = self._config.get("names", None)
        if names is None:
            names = _names
        elif isinstance(names, str):
            names = names.split()
        # YAML may hand us numbers or booleans
        names = [str(n) for n in names]
        self._config["names"] = tuple(normalize_names(names))

        directive = self._config.get("directive", None)
        if directive is None:
            directive = Directive()
        elif isinstance(directive, str):
            directive = Directive.parse(directive)
        self._config["directive"] = directive

    def __getitem__(self, index):
        return self._config[index]

    def __len__(self):
        return len(self._config)

    def __iter__(self):
        return iter(self._config)

    def __getattr__(self, key):
        try:
            return self.__dict__["_config"][key]
        except KeyError:
            raise AttributeError(key) from None

    def __repr__(self):
        return f"{self.__class__.__name__}({dict(self._config)!r})"


default_config = dict(
    names=_names,
    directive="%v",
)

iec_config = dict(
    names=("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB"),
    directive="% .1f",
)

long_config = dict(
    names=(
        "bytes",
        "kilobytes",
        "megabytes",
        "gigabytes",
        "terabytes",
        "petabytes",
        "exabytes",
    ),
    directive="% v",
)

_presets = {
    "default_config": default_config,
    "iec_config": iec_config,
    "long_config": long_config,
}
