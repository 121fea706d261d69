"""改写对象上的方法，支持在原方法之后、之前执行，变换返回值以及完全包装原方法"""
from .version import __version__
from .injectors import Decorator, after, After, before, Before, compose, Compose, wrap, Wrap
from .ride import ride
from .ride_context import riding, RideContext
