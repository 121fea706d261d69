import pytest

from ride import ride, riding, RideContext


class ValueHolder:
    def __init__(self, x):
        self.x = x

    def get(self):
        return self.x

    @staticmethod
    def describe():
        return 'holder'


def test_riding_inherited_method():
    holder = ValueHolder(1)

    with riding(holder, 'get', ride.compose(lambda this, x: x + 1)) as target:
        assert target is holder
        assert holder.get() == 2

    assert holder.get() == 1
    assert 'get' not in vars(holder)


def test_riding_restores_own_attribute():
    holder = ValueHolder(1)
    ride(holder, 'get', ride.compose(lambda this, x: x * 10))
    ridden = vars(holder)['get']

    with riding(holder, 'get', ride.compose(lambda this, x: x + 1)):
        assert holder.get() == 11

    assert vars(holder)['get'] is ridden
    assert holder.get() == 10


def test_riding_class():
    class Clazz(ValueHolder):
        pass

    with riding(Clazz, 'get', ride.after(lambda this: setattr(this, 'x', this.x + 1))):
        holder = Clazz(1)
        assert holder.get() == 1
        assert holder.x == 2

    assert 'get' not in vars(Clazz)
    assert Clazz(1).get() == 1

    # 恢复原有的描述符，而不是经getattr得到的函数
    with riding(ValueHolder, 'describe', lambda orig: staticmethod(lambda: orig().upper())):
        assert ValueHolder.describe() == 'HOLDER'

    assert isinstance(vars(ValueHolder)['describe'], staticmethod)
    assert ValueHolder.describe() == 'holder'


def test_riding_rolls_back_on_error():
    holder = ValueHolder(1)

    with pytest.raises(ValueError):
        with riding(holder, 'get', ride.before(lambda this: None)):
            raise ValueError()

    assert 'get' not in vars(holder)


def test_riding_nested():
    holder = ValueHolder(1)

    with riding(holder, 'get', ride.compose(lambda this, x: x + 1)):
        with riding(holder, 'get', ride.compose(lambda this, x: x * 10)):
            assert holder.get() == 20
        assert holder.get() == 2

    assert holder.get() == 1


def test_ride_context_apply_and_rollback():
    holder = ValueHolder(1)
    ctx = RideContext(holder, 'get', ride.compose(lambda this, x: -x))

    assert not ctx.applied
    with pytest.raises(RuntimeError):
        ctx.rollback()

    ctx.apply()
    assert ctx.applied
    assert holder.get() == -1

    ctx.rollback()
    assert not ctx.applied
    assert holder.get() == 1


def test_ride_context_failed_apply():
    holder = ValueHolder(1)

    def broken(orig):
        raise ValueError('broken')

    ctx = RideContext(holder, 'get', broken)
    with pytest.raises(ValueError):
        ctx.apply()

    assert not ctx.applied
    assert holder.get() == 1


def test_ride_context_apply_twice():
    holder = ValueHolder(1)
    ctx = RideContext(holder, 'get', ride.compose(lambda this, x: x + 1))

    ctx.apply()
    with pytest.raises(RuntimeError):
        ctx.apply()
    assert holder.get() == 2

    ctx.rollback()
    assert holder.get() == 1
    assert 'get' not in vars(holder)
