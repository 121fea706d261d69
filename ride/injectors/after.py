from .decorator import Decorator
from .utils import call_with_receiver, wraps_original


class After(Decorator):
    def __call__(self, orig):
        extra_behavior = self.behavior

        @wraps_original(orig)
        def wrapper(this, *args, **kwargs):
            result = call_with_receiver(orig, this, *args, **kwargs)
            call_with_receiver(extra_behavior, this, *args, **kwargs)

            return result

        return wrapper


def after(extra_behavior):
    """在原方法返回后执行extra_behavior

    Parameters
    ----------
    extra_behavior
        原方法返回后调用的函数，接收与原方法相同的接收者和参数

    Returns
    -------
    ret
        装饰器工厂，用于ride

    Notes
    -----
        extra_behavior的返回值会被忽略，替换方法总是返回原方法的返回值
        原方法抛出异常时extra_behavior不会被调用

    Examples
    --------
    >>> ride(test, 'save_results', ride.after(save_plan))

    See Also
    --------
        before: 在原方法之前执行
        compose: 变换原方法的返回值
    """
    return After(extra_behavior)
