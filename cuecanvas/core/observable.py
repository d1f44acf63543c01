"""
CueCanvas Observable Values

Small read/write/subscribe value holders. UI code binds to them to
follow viewport and layer state; the rendering core only reads and
writes the plain values.
"""

from typing import Any, Callable, Dict, List

Subscriber = Callable[[Any, Any], None]


class Cell:
    """
    A single mutable value with change notification.
    
    Subscribers are called with (new_value, old_value) after the value
    changes. Setting an equal value does not notify.
    """
    
    def __init__(self, value: Any = None):
        self._value = value
        self._subscribers: List[Subscriber] = []
    
    def get(self) -> Any:
        return self._value
    
    def set(self, value: Any) -> None:
        old = self._value
        self._value = value
        if old == value:
            return
        for callback in list(self._subscribers):
            callback(value, old)
    
    @property
    def value(self) -> Any:
        return self._value
    
    @value.setter
    def value(self, value: Any) -> None:
        self.set(value)
    
    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a change callback.
        
        Returns:
            A function that removes the callback again.
        """
        self._subscribers.append(callback)
        
        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)
        
        return unsubscribe
    
    def __repr__(self) -> str:
        return f"Cell({self._value!r})"


class CellGroup:
    """
    A fixed set of named cells read and written like plain attributes.
    
    Example:
        horizon = CellGroup(x=0.0, y=0.0, ratio=1.0)
        horizon.ratio = 2.0          # sets the cell
        horizon.cell('ratio')        # the Cell, for subscribing
    """
    
    def __init__(self, **initial: Any):
        object.__setattr__(self, '_cells', {
            name: Cell(value) for name, value in initial.items()
        })
    
    def cell(self, name: str) -> Cell:
        """Get the underlying Cell for a field."""
        try:
            return self.__dict__["_cells"][name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__} has no field '{name}'") from None
    
    def as_dict(self) -> Dict[str, Any]:
        return {name: cell.get() for name, cell in self._cells.items()}
    
    def __getattr__(self, name: str) -> Any:
        # Only reached for names not found normally. Private and dunder
        # names are never fields; copy and pickle probe them before _cells exists.
        if name.startswith("_"):
            raise AttributeError(name)
        return self.cell(name).get()
    
    def __setattr__(self, name: str, value: Any) -> None:
        self.cell(name).set(value)
    
    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.as_dict().items())
        return f"{type(self).__name__}({fields})"
