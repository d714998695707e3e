"""Terminal user interface.

- components: themed console, navigation menu, loading spinner
- navigation: route table and screen loop
- views: the screens themselves
"""
