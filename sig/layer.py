import logging
import threading
from typing import Any, Dict, List, Optional

from .visibility import Visibility

LAYER_ATTRIBUTE = "_sig_layer"

logger = logging.getLogger(__name__)

_creation_lock = threading.Lock()


def target_name(target: Any) -> str:
    return getattr(target, "__qualname__", None) or getattr(target, "__name__", None) or repr(target)


class InterceptionLayer:
    """
Holds every checked wrapper installed on one target, together with the
original implementation each of them delegates to.

A target has at most one layer, kept in its own ``__dict__`` so a
subclass never shares the layer of its base class. Installs on the same
target are serialised through ``lock``.
    """
    def __init__(self, target: Any):
        self._target_name = target_name(target)
        self.originals: Dict[str, Any] = {}
        self.wrappers: Dict[str, Any] = {}
        self.visibilities: Dict[str, Visibility] = {}
        self.lock = threading.RLock()
        self._logger = logging.getLogger(self.__class__.__name__)

    def __repr__(self) -> str:
        return f"<Sig:{id(self)} {self._target_name}>"

    def __len__(self) -> int:
        return len(self.wrappers)

    def __contains__(self, attribute: str) -> bool:
        return attribute in self.wrappers

    def method_names(self) -> List[str]:
        return list(self.wrappers)

    def original_for(self, attribute: str, current: Any) -> Any:
        """
Returns what a new wrapper for ``attribute`` should delegate to.

While our wrapper is still the installed value, that is the remembered
original; if the attribute was reassigned since, the new value is.
        """
        if attribute in self.wrappers and current is self.wrappers[attribute]:
            return self.originals[attribute]
        return current

    def record(self, attribute: str, original: Any, wrapper: Any, visibility: Visibility) -> None:
        replaced = attribute in self.wrappers
        self.originals[attribute] = original
        self.wrappers[attribute] = wrapper
        self.visibilities[attribute] = visibility
        action = "Replaced" if replaced else "Installed"
        self._logger.debug(f"{action} {visibility.value} wrapper {self._target_name}.{attribute}")


def get_layer(target: Any) -> Optional[InterceptionLayer]:
    try:
        namespace = vars(target)
    except TypeError:
        return None
    return namespace.get(LAYER_ATTRIBUTE)


def get_or_create_layer(target: Any) -> InterceptionLayer:
    layer = get_layer(target)
    if layer is not None:
        return layer
    with _creation_lock:
        layer = get_layer(target)
        if layer is None:
            layer = InterceptionLayer(target)
            setattr(target, LAYER_ATTRIBUTE, layer)
            logger.debug(f"Created interception layer for {target_name(target)}")
    return layer
