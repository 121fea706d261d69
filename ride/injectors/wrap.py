from .decorator import Decorator
from .utils import call_with_receiver, wraps_original


class Wrap(Decorator):
    def __call__(self, orig):
        around = self.behavior

        @wraps_original(orig)
        def wrapper(this, *args, **kwargs):
            def wrapped():
                return call_with_receiver(orig, this, *args, **kwargs)

            return call_with_receiver(around, this, wrapped, *args, **kwargs)

        return wrapper


def wrap(wrapper):
    """使用wrapper代替原方法执行

    Parameters
    ----------
    wrapper
        代替原方法被调用的函数，第一个参数为无参可调用对象wrapped，
        调用wrapped会以原接收者和原参数调用原方法并返回其结果，之后依次传入原方法的全部参数

    Returns
    -------
    ret
        装饰器工厂，用于ride

    Notes
    -----
        wrapper可以不调用、调用一次或多次调用wrapped，也可以变换其结果或直接抛出异常

    Examples
    --------
    >>> def delete_post(this, wrapped, post_id):
    ...     if this.user.owns(post_id):
    ...         return wrapped()
    ...     raise PermissionError('No, you can\\'t do that!')
    >>> ride(test, 'delete_post', ride.wrap(delete_post))
    """
    return Wrap(wrapper)
