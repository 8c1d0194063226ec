"""The markers applied by the shared conftest are registered."""


def test_unit_marker_registered(pytestconfig, request):
    assert any(line.startswith("unit:") for line in pytestconfig.getini("markers"))
    assert request.node.get_closest_marker("unit") is not None
