from .decorator import Decorator
from .after import after, After
from .before import before, Before
from .compose import compose, Compose
from .wrap import wrap, Wrap
from .utils import call_with_receiver, wrap_method_with_target
