from dataclasses import asdict, fields, is_dataclass
from typing import Any

def prune(value: Any) -> Any:
    """
    Recursively drop None and empty containers/strings from a dict/list
    structure.  Falsy numbers and bools are real values and are kept.
    """
    if isinstance(value, dict):
        pruned = {}
        for k, v in value.items():
            p = prune(v)
            if p is None or (not isinstance(p, (int, float, bool)) and not p):
                continue
            pruned[k] = p
        return pruned
    if isinstance(value, list):
        return [prune(v) for v in value]
    return value

class GoogleWorkSpaceResourceBase():
    """
    Intended to be subclassed by a dataclass but isnt actually a dataclass.
    Gives the dict translation needed by the Sheets client.
    """
    @classmethod
    def from_base(cls, base: dict):
        """
        Inverse of to_base() for a dict as returned by the client.
        Keys the dataclass doesn't know about are dropped, the API adds
        fields over time and we don't want that to break parsing.
        """
        b = dict(base or {})
        if is_dataclass(cls):
            names = {f.name for f in fields(cls) if f.init}
            b = {k: v for k, v in b.items() if k in names}
        return cls(**b)

    def to_base(self) -> dict:
        """
        Default just return the dict representation of the object as needed by
        the client.  Something more complicated can override.
        Call fixup() first to ensure all fields are in correct format.
        """
        self.fixup()
        return asdict(self)

    def trim(self) -> dict:
        """
        Return a 'trimmed' dict of the resource, removing any attributes at any
        depth that are None or empty.  For empty it needs to be a string or
        container, an int/float/bool is always kept as 0 or False can be a
        valid value.  Formatting requests only want the filled-in fields,
        anything sent is applied to the cell.
        """
        return prune(self.to_base())

    def fixup(self) -> None:
        """
        notify a subclass to do any field adjustments
        """
        pass


    def update_fields(self, **kwargs) -> list[str]:
        """
        Update fields that may be present, typically from a client response.
        Unknown names and None values are skipped.  Returns the names updated.
        """
        updated_fields = []
        if is_dataclass(self):
            names = {f.name for f in fields(self)}
            for k, v in kwargs.items():
                if v is not None and k in names:
                    setattr(self, k, v)
                    updated_fields.append(k)
            self.fixup()
        return updated_fields
