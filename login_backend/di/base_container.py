# Standard library imports
from typing import Any, Callable, Dict


class BaseContainer:
    """
    Minimal dependency injection container.
    
    Registrations are keyed by type (or by a string name). Singletons are
    shared instances; factories build a new object on every get().
    """
    
    def __init__(self) -> None:
        self._singletons: Dict[Any, Any] = {}
        self._factories: Dict[Any, Callable[[], Any]] = {}
    
    def register_singleton(self, key: Any, instance: Any) -> None:
        """Register a shared instance under key"""
        self._singletons[key] = instance
    
    def register_factory(self, key: Any, factory: Callable[[], Any]) -> None:
        """Register a zero-argument factory under key"""
        self._factories[key] = factory
    
    def get(self, key: Any) -> Any:
        """
        Resolve a registration
        
        Args:
            key: Type or name used at registration
            
        Returns:
            The singleton instance, or a fresh object from the factory
            
        Raises:
            KeyError: If nothing is registered under key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        raise KeyError(f"No registration found for {key!r}")
