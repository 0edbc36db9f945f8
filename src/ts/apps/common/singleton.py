from threading import Lock

_singleton_locks = dict()
_singleton_locks_guard = Lock()


class Singleton:
    """
    One shared instance per subclass.  Subclasses put their one-time setup
    in __init_singleton__() rather than __init__().
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            with _singleton_locks_guard:
                class_lock = _singleton_locks.setdefault( cls, Lock() )
            with class_lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance.__init_singleton__()
                    cls._instance = instance
        return cls._instance

    def __init_singleton__(self):
        """ Subclasses can override this if needed. """
        return
