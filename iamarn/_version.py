"""Version information, loadable without importing the package."""
__version__ = '0.1.0'

def get_cmdclass(pkg_path: str) -> dict:
    # no custom setuptools commands; kept so setup.py can ask for them
    return {}
