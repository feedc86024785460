pytest_plugins = ("valuepath.testing",)
