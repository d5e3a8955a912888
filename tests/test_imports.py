"""
Smoke tests to verify all modules can be imported.
"""

def test_import_projector_core():
    import projector_core
    assert hasattr(projector_core, '__version__')


def test_import_store():
    import store
    assert hasattr(store, '__version__')


def test_import_commands():
    import commands
    assert hasattr(commands, '__version__')
