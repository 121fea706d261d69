from .decorator import Decorator
from .utils import call_with_receiver, wraps_original


class Compose(Decorator):
    def __call__(self, orig):
        transformer = self.behavior

        @wraps_original(orig)
        def wrapper(this, *args, **kwargs):
            return call_with_receiver(transformer, this, call_with_receiver(orig, this, *args, **kwargs))

        return wrapper


def compose(transformer):
    """使用transformer变换原方法的返回值

    Parameters
    ----------
    transformer
        接收原方法返回值并返回新返回值的函数，调用时的接收者与原方法相同

    Returns
    -------
    ret
        装饰器工厂，用于ride

    Notes
    -----
        原方法抛出异常时transformer不会被调用

    Examples
    --------
    >>> ride(test, 'get_name', ride.compose(lambda this, name: name.upper()))
    """
    return Compose(transformer)
