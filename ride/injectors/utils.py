import functools
import types


def wrap_method_with_target(target, func):
    if target is not None and not isinstance(target, (type, types.ModuleType)) \
            and isinstance(func, types.FunctionType):
        # 目标不是None、类型与模块，则是实例，func是普通函数，直接绑定为实例方法
        wrapper = types.MethodType(func, target)
        is_target_method = True
    else:
        wrapper = func
        is_target_method = False

    return wrapper, is_target_method


def is_instance_function(target, name, value):
    """判断value是否为实例target自身__dict__中持有的普通函数"""
    if target is None or isinstance(target, (type, types.ModuleType)):
        return False

    own_attrs = getattr(target, '__dict__', {})
    return isinstance(value, types.FunctionType) and own_attrs.get(name) is value


class Unbound:
    def __init__(self, func):
        """包装实例上持有的普通函数，使其在调用时不接收接收者"""
        functools.update_wrapper(self, func, updated=())
        self.func = func

    def __call__(self, *args, **kwargs):
        return self.func(*args, **kwargs)

    def __eq__(self, other):
        if isinstance(other, Unbound):
            other = other.func
        return self.func == other

    def __hash__(self):
        return hash(self.func)

    def __repr__(self):
        return f'Unbound({self.func!r})'


def call_with_receiver(func, this, *args, **kwargs):
    """以this作为接收者调用func

    Parameters
    ----------
    func
        待调用的对象
    this
        接收者，即方法调用时的self
    args
        位置参数
    kwargs
        关键字参数

    Returns
    -------
    ret
        func的返回值

    Notes
    -----
        只有普通函数（包括lambda）需要显式传入接收者，与类成员函数在实例上被绑定的行为一致。
        绑定方法、内置函数和可调用对象已经持有各自的上下文，因此直接以原参数调用。
    """
    if isinstance(func, types.FunctionType):
        return func(this, *args, **kwargs)
    return func(*args, **kwargs)


def wraps_original(orig):
    """返回用于复制原方法元信息的装饰器，原方法不可调用时不做修改"""
    if not callable(orig):
        return lambda wrapper: wrapper

    # 绑定方法的签名不包含self，而替换函数总是以接收者作为第一个参数，因此取其底层函数
    return functools.wraps(getattr(orig, '__func__', orig), updated=())
