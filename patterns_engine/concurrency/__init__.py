from .active_object import Counter
