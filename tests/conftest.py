"""
Pytest configuration and shared fixtures for time assigner tests.
"""
import json
import pytest


@pytest.fixture
def make_node():
    """Build a raw node mapping in the document shape."""
    def _make_node(name, children=None, time=None, default_time=None, result=None, **extra):
        node = {'name': name, 'children': children or []}
        variables = {}
        if time is not None:
            variables['time'] = time
        if default_time is not None:
            variables['default_time'] = default_time
        node['variables'] = variables
        if result is not None:
            node['initialValues'] = {'result': result}
        node.update(extra)
        return node
    
    return _make_node


@pytest.fixture
def sample_document():
    """Sample document with two sheets."""
    return {
        "title": "Release plan",
        "children": [
            {
                "name": "Backend",
                "variables": {"time": "100", "owner": "kim"},
                "children": [
                    {"name": "API", "variables": {"time": 40}, "children": []},
                    {"name": "Schema", "variables": {}, "children": []},
                    {"name": "Migrations", "variables": {}, "children": []},
                ],
            },
            {
                "name": "Frontend",
                "variables": {"default_time": 5},
                "children": [
                    {
                        "name": "Pages",
                        "variables": {},
                        "children": [
                            {"name": "Login", "variables": {}, "children": []},
                            {
                                "name": "Legacy",
                                "variables": {},
                                "initialValues": {"result": "-dropped"},
                                "children": [],
                            },
                        ],
                    }
                ],
            },
        ],
    }


@pytest.fixture
def temp_json_file(tmp_path):
    """Create a temporary JSON file and return a helper function."""
    def _create_file(data, name="tasks.json"):
        file_path = tmp_path / name
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(data, f)
        return str(file_path)
    
    return _create_file
