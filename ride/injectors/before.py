from .decorator import Decorator
from .utils import call_with_receiver, wraps_original


class Before(Decorator):
    def __call__(self, orig):
        extra_behavior = self.behavior

        @wraps_original(orig)
        def wrapper(this, *args, **kwargs):
            call_with_receiver(extra_behavior, this, *args, **kwargs)
            return call_with_receiver(orig, this, *args, **kwargs)

        return wrapper


def before(extra_behavior):
    """在原方法调用前执行extra_behavior

    Parameters
    ----------
    extra_behavior
        原方法调用前执行的函数，接收与原方法相同的接收者和参数

    Returns
    -------
    ret
        装饰器工厂，用于ride

    Notes
    -----
        extra_behavior的返回值会被忽略
        extra_behavior抛出异常时原方法不会被调用

    Examples
    --------
    >>> ride(test, 'exit', ride.before(capture_screenshot))

    See Also
    --------
        after: 在原方法之后执行
        wrap: 完全控制原方法的调用
    """
    return Before(extra_behavior)
