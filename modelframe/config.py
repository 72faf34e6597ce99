class Config:
    """Package-wide options. The first choice of every field is its default value.

    * ``THREE_WAY_INTERACTION``: ``"legacy"`` makes three-way interactions pick the columns of
      the third operand using the index range of the second operand. ``"full"`` uses every
      column of the third operand.
    * ``DUPLICATE_NAMES``: ``"keep"`` leaves repeated design column names as they are.
      ``"suffix"`` renames repeated names to ``name.1``, ``name.2``, and so on.
    """

    FIELDS = {
        "THREE_WAY_INTERACTION": ("legacy", "full"),
        "DUPLICATE_NAMES": ("keep", "suffix"),
    }

    def __init__(self, config_dict: dict = None):
        config_dict = {} if config_dict is None else config_dict
        for field, choices in Config.FIELDS.items():
            self[field] = config_dict.get(field, choices[0])

    def __setitem__(self, key, value):
        setattr(self, key, value)

    def __setattr__(self, key, value):
        if key not in Config.FIELDS:
            raise KeyError(f"'{key}' is not a valid configuration option")
        if value not in Config.FIELDS[key]:
            raise ValueError(f"{value} is not a valid value for '{key}'")
        super().__setattr__(key, value)

    def __getitem__(self, key):
        return getattr(self, key)

    def reset(self):
        """Restore the default value of every field"""
        for field, choices in Config.FIELDS.items():
            self[field] = choices[0]

    def __str__(self):  # pragma: no cover
        lines = []
        for field, choices in Config.FIELDS.items():
            lines.append(f"{field}: {self[field]} (available: {list(choices)})")
        header = ["modelframe configuration"]
        header.append("-" * len(header[0]))
        return "\n".join(header + lines)

    def __repr__(self):  # pragma: no cover
        return str(self)


config = Config()
