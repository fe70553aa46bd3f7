# showcase_ui/ui/__init__.py
