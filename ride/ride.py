import warnings

from .injectors import after, before, compose, wrap
from .injectors.utils import wrap_method_with_target, is_instance_function, Unbound

_missing = object()


def ride(target, name, decorator=None):
    """使用decorator改写target上名为name的方法

    Parameters
    ----------
    target
        待改写方法的所在对象，支持实例与类
    name
        待改写方法的名字
    decorator
        装饰器工厂，接收原方法并返回替换方法，为None时返回一个用于注解装饰器工厂的装饰器

    Returns
    -------
    ret
        decorator为None时返回装饰器，否则无返回值

    Notes
    -----
        原方法通过getattr获取，因此可以是继承自类或基类的方法，替换方法通过setattr写回target，覆盖被继承的值

        target为实例且替换方法为普通函数时，替换方法会被绑定到target上，以接收者作为第一个参数被调用

        原方法不可调用时不会报错，decorator将接收到原值，原方法不存在时decorator将接收到None

        target为实例且原方法是实例自身持有的普通函数（例如回调）时，decorator接收到的是包装后的Unbound，
        调用时不会传入接收者

    Examples
    --------
    >>> ride(test, 'save_results', ride.after(save_plan))

    >>> @ride(test, 'run')
    ... def run(orig):
    ...     return lambda this, x: orig(x) + 1

    See Also
    --------
        ride.after: 在原方法之后执行
        ride.before: 在原方法之前执行
        ride.compose: 变换原方法的返回值
        ride.wrap: 完全控制原方法的调用
        riding: 可回滚的ride
    """
    if decorator is None:
        def ride_with(decorator):
            ride(target, name, decorator)
            return decorator

        return ride_with

    orig = getattr(target, name, _missing)
    if orig is _missing:
        warnings.warn(f'Trying to ride non-existing method `{name}` on {target!r},'
                      f' decorator will receive None.',
                      stacklevel=2)
        orig = None
    elif is_instance_function(target, name, orig):
        # 实例自身持有的普通函数不接收接收者
        orig = Unbound(orig)

    replacement, _ = wrap_method_with_target(target, decorator(orig))
    setattr(target, name, replacement)


ride.after = after
ride.before = before
ride.compose = compose
ride.wrap = wrap
