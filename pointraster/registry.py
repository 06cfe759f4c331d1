# pointraster/registry.py
# Pluggable stages by kind: "edge" (out-of-range index policies) and
# "gen" (point-set generators). Filled when the stage modules are imported.
KINDS = ("edge", "gen")
REGISTRY = {kind: {} for kind in KINDS}

def _table(kind):
    if kind not in REGISTRY:
        raise KeyError(f"Unknown kind '{kind}' (expected one of {list(KINDS)})")
    return REGISTRY[kind]

def register(kind, name):
    table = _table(kind)
    def deco(cls):
        other = table.get(name)
        if other is not None and other is not cls:
            raise ValueError(f"{kind} '{name}' already registered by {other.__name__}")
        table[name] = cls
        return cls
    return deco

def available(kind):
    return sorted(_table(kind))

def build(kind, name, **kwargs):
    table = _table(kind)
    if name not in table:
        raise KeyError(f"Unknown {kind} '{name}' (available: {available(kind)})")
    return table[name](**kwargs)
