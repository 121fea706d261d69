from abc import ABC, abstractmethod


class Decorator(ABC):
    def __init__(self, behavior):
        """由原方法构造替换方法的装饰器工厂

        Parameters
        ----------
        behavior
            附加到原方法上的行为

        Notes
        -----
            子类通过__call__接收原方法并返回替换方法，
            替换方法的第一个参数总是接收者，其余参数与原方法一致
        """
        self.behavior = behavior

    @abstractmethod
    def __call__(self, orig):
        pass

    def __repr__(self):
        return f'{type(self).__name__}({self.behavior!r})'
