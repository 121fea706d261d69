from setuptools import setup
from versioningit import get_cmdclasses


setup(
    # 其余配置见pyproject.toml，这里仅注册versioningit的构建命令，用于在构建时写入_version.py
    cmdclass=get_cmdclasses(),
)
