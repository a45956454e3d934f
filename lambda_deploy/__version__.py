"""Version information for lambda-deploy package"""

__version__ = "1.0.0"
__version_info__ = (1, 0, 0)
__license__ = "MIT"


def get_version():
    """Get the version string"""
    return __version__
