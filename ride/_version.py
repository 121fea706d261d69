__version__ = '__UNSPECIFIED__'


def get_version():
    from pathlib import Path
    error = ImportError

    if __version__ == '__UNSPECIFIED__':
        # 源码状态下（未经构建）从git仓库状态推断版本号
        try:
            from versioningit import get_version, NotVersioningitError, NotSdistError, NotVCSError
            error = NotVersioningitError, NotSdistError, NotVCSError

            return get_version(Path(__file__).parent.parent)
        except error:
            return '0.0.0'
    else:
        return __version__
