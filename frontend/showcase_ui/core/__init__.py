# showcase_ui/core/__init__.py
