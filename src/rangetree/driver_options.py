from typing import Optional, Any

# --- Configuration ---
DEFAULT_INPUT: str = "sum.in"
DEFAULT_OUTPUT: str = "sum.out"
DEFAULTS: dict[str, Any] = {
    "input": DEFAULT_INPUT,
    "output": DEFAULT_OUTPUT,
    "verbose": False,  # log the tree after every assignment
}


class DriverOptions:
    def __init__(self, opts: Optional[dict[str, Any]] = None):
        self._options: dict[str, Any] = dict(DEFAULTS)
        if opts is not None:
            self.update(opts)

    def __getitem__(self, key: str):
        return self._options[key]

    def __setitem__(self, key: str, value):
        self.update({key: value})

    def __contains__(self, key: str) -> bool:
        return key in self._options

    def __repr__(self):
        return f"<DriverOptions {self._options!r}>"

    def update(self, opts: dict[str, Any]):
        unknown = set(opts) - set(DEFAULTS)
        if unknown:
            raise KeyError(f"Unknown driver options: {sorted(unknown)}")
        self._options.update(opts)

    def get(self, key, default=None) -> Any:
        return self._options.get(key, default)

    def keys(self):
        return self._options.keys()
