
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "group_shape: marks tests related to shape functionality")
    config.addinivalue_line("markers", "group_polygon: marks tests related to polygon functionality")
    config.addinivalue_line("markers", "group_circle: marks tests related to circle functionality")
    config.addinivalue_line("markers", "group_rectangle: marks tests related to rectangle functionality")
    config.addinivalue_line("markers", "group_triangle: marks tests related to triangle functionality")
    config.addinivalue_line("markers", "group_validation: marks tests related to parameter validation")
    config.addinivalue_line("markers", "group_calculator: marks tests related to the shape calculator")
    config.addinivalue_line("markers", "group_cli: marks tests related to the demo command line")
