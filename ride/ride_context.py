from .ride import ride


class RideContext:
    def __init__(self, target, name, decorator):
        """可回滚的ride

        Parameters
        ----------
        target
            待改写方法的所在对象
        name
            待改写方法的名字
        decorator
            装饰器工厂，接收原方法并返回替换方法

        Notes
        -----
            进入时执行ride，退出时回滚，回滚会恢复target上原有的同名属性，
            若原方法来自继承或不存在，则删除ride写入的属性

            同一方法上的多个RideContext需要按逆序退出
        """
        self.target = target
        self.name = name
        self.decorator = decorator
        self.backup = None

    def __enter__(self):
        self.apply()
        return self.target

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.rollback()

    @property
    def applied(self):
        return self.backup is not None

    def apply(self):
        if self.applied:
            raise RuntimeError(f'Trying to ride `{self.name}` which has already been ridden.')

        own_attrs = getattr(self.target, '__dict__', {})
        if self.name in own_attrs:
            self.backup = (True, own_attrs[self.name])
        else:
            self.backup = (False, None)

        try:
            ride(self.target, self.name, self.decorator)
        except BaseException:
            self.backup = None
            raise

    def rollback(self):
        if not self.applied:
            raise RuntimeError(f'Trying to rollback `{self.name}` which has not been ridden.')

        has_own, value = self.backup
        self.backup = None

        if has_own:
            setattr(self.target, self.name, value)
        else:
            delattr(self.target, self.name)


def riding(target, name, decorator):
    """临时改写target上名为name的方法，在with语句结束后恢复

    Examples
    --------
    >>> with riding(test, 'run', ride.before(print)):
    ...     test.run(42)

    See Also
    --------
        ride: 改写方法
        RideContext: ride的上下文
    """
    return RideContext(target, name, decorator)
