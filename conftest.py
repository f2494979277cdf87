pytest_plugins = ["pytester", "outletcheck.pytest_plugin"]
