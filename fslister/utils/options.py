from dataclasses import dataclass, fields

import yaml


@dataclass(frozen=True)
class ListOptions:
    """Listing options.

    Attributes
    ----------
    show_details : bool
        Print metadata rows instead of bare names.
    recursive : bool
        Descend into subdirectories.
    show_hidden : bool
        Include entries starting with a dot.
    show_inode : bool
        Prepend inode number to metadata rows.
    human_readable : bool
        Print sizes with binary unit suffixes.
    """

    show_details: bool = False
    recursive: bool = False
    show_hidden: bool = False
    show_inode: bool = False
    human_readable: bool = False

    @classmethod
    def from_yaml(cls, path: str) -> 'ListOptions':
        """Creates class instance from configuration path.

        Parameters
        ----------
        path : str
            path to configuration file.

        Returns
        -------
        ListOptions
            Class instance.
        """
        with open(path) as f:
            config = yaml.safe_load(f)
        if config is None:
            return cls()
        if not isinstance(config, dict):
            raise ValueError(f"configuration file '{path}' must contain a mapping")
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            raise ValueError(f"unknown options in '{path}': {', '.join(map(str, unknown))}")
        for key, value in config.items():
            if not isinstance(value, bool):
                raise ValueError(f"option '{key}' in '{path}' must be true or false, got {value!r}")
        return cls(**config)

    def merge(self, **flags: bool) -> 'ListOptions':
        """Returns a copy with the given flags switched on."""
        values = {field.name: getattr(self, field.name) for field in fields(self)}
        for key, value in flags.items():
            if key not in values:
                raise ValueError(f"unknown option: '{key}'")
            values[key] = values[key] or bool(value)
        return ListOptions(**values)
