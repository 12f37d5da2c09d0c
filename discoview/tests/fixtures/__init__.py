"""Test fixtures for discoview tests.

This module provides sample discovery documents used across the test
suite. COMPUTE_DISCOVERY follows the shape of the Compute Engine document
with just enough methods to cover path parameters, a request body, a
repeated query parameter and a method declaring a standard parameter.
"""

# Minimal document: no resources, no methods
MINIMAL_DISCOVERY = {
    'kind': 'discovery#restDescription',
    'discoveryVersion': 'v1',
    'id': 'minimal:v1',
    'name': 'minimal',
    'version': 'v1',
}

INSTANCE_GET_PATH = 'projects/{project}/zones/{zone}/instances/{instance}'
INSTANCES_PATH = 'projects/{project}/zones/{zone}/instances'


def _path_param(description):
    return {
        'type': 'string',
        'required': True,
        'location': 'path',
        'description': description,
    }


PROJECT_PARAM = _path_param('Project ID for this request.')
ZONE_PARAM = _path_param('The name of the zone for this request.')
INSTANCE_PARAM = _path_param('Name of the instance resource to return.')

COMPUTE_DISCOVERY = {
    'kind': 'discovery#restDescription',
    'discoveryVersion': 'v1',
    'id': 'compute:v1',
    'name': 'compute',
    'version': 'v1',
    'title': 'Compute Engine API',
    'rootUrl': 'https://compute.googleapis.com/',
    'servicePath': 'compute/v1/',
    'parameters': {
        'fields': {
            'type': 'string',
            'location': 'query',
            'description': 'Selector specifying which fields to include in a partial response.',
        },
    },
    'schemas': {
        'Instance': {
            'id': 'Instance',
            'type': 'object',
            'description': 'Represents an Instance resource.',
            'properties': {
                'name': {'type': 'string'},
                'machineType': {'type': 'string'},
            },
        },
        'Address': {
            'id': 'Address',
            'type': 'object',
            'properties': {'address': {'type': 'string'}},
        },
    },
    'resources': {
        'instances': {
            'methods': {
                'get': {
                    'id': 'compute.instances.get',
                    'path': INSTANCE_GET_PATH,
                    'flatPath': INSTANCE_GET_PATH,
                    'httpMethod': 'GET',
                    'description': 'Returns the specified Instance resource.',
                    'parameters': {
                        'project': PROJECT_PARAM,
                        'zone': ZONE_PARAM,
                        'instance': INSTANCE_PARAM,
                    },
                    'parameterOrder': ['project', 'zone', 'instance'],
                    'response': {'$ref': 'Instance'},
                },
                'insert': {
                    'id': 'compute.instances.insert',
                    'path': INSTANCES_PATH,
                    'httpMethod': 'POST',
                    'description': 'Creates an instance resource in the specified project.',
                    'parameters': {
                        'project': PROJECT_PARAM,
                        'zone': ZONE_PARAM,
                        'requestId': {
                            'type': 'string',
                            'location': 'query',
                            'description': 'An optional request ID to identify requests.',
                        },
                        'sourceInstanceTemplate': {
                            'type': 'string',
                            'location': 'query',
                        },
                    },
                    'parameterOrder': ['project', 'zone'],
                    'request': {'$ref': 'Instance'},
                    'response': {'$ref': 'Operation'},
                },
                'list': {
                    'id': 'compute.instances.list',
                    'path': INSTANCES_PATH,
                    'httpMethod': 'GET',
                    'description': 'Retrieves the list of instances contained within the specified zone.',
                    'parameters': {
                        'project': PROJECT_PARAM,
                        'zone': ZONE_PARAM,
                        'filter': {'type': 'string', 'location': 'query'},
                        'maxResults': {
                            'type': 'integer',
                            'format': 'uint32',
                            'minimum': 0,
                            'default': '500',
                            'location': 'query',
                        },
                        'pageToken': {'type': 'string', 'location': 'query'},
                    },
                    'parameterOrder': ['project', 'zone'],
                },
                'update': {
                    'id': 'compute.instances.update',
                    'path': INSTANCE_GET_PATH,
                    'httpMethod': 'PUT',
                    'description': 'Updates an instance.',
                    'parameters': {
                        'project': PROJECT_PARAM,
                        'zone': ZONE_PARAM,
                        'instance': INSTANCE_PARAM,
                        'minimalAction': {'type': 'string', 'location': 'query'},
                    },
                    'parameterOrder': ['project', 'zone', 'instance'],
                    'request': {'$ref': 'Instance'},
                },
            }
        },
        'addresses': {
            'methods': {
                'aggregatedList': {
                    'id': 'compute.addresses.aggregatedList',
                    'path': 'projects/{project}/aggregated/addresses',
                    'httpMethod': 'GET',
                    'description': 'Retrieves an aggregated list of addresses.',
                    'parameters': {
                        'project': PROJECT_PARAM,
                        'fields': {
                            'type': 'string',
                            'location': 'query',
                            'description': 'Restricts the fields returned.',
                        },
                        'includeAllScopes': {'type': 'boolean', 'location': 'query'},
                        'zones': {
                            'type': 'string',
                            'repeated': True,
                            'location': 'query',
                            'description': 'Zones to aggregate over.',
                        },
                    },
                    'parameterOrder': ['project'],
                },
            }
        },
    },
}

# Document with top-level methods and nested resources
NESTED_DISCOVERY = {
    'name': 'workflows',
    'version': 'v1',
    'schemas': {
        'Workflow': {'id': 'Workflow', 'type': 'object'},
    },
    'methods': {
        'ping': {
            'id': 'workflows.ping',
            'path': 'v1/ping/{target}',
            'httpMethod': 'GET',
            'parameters': {
                'target': {'type': 'string', 'required': True, 'location': 'path'},
            },
        },
    },
    'resources': {
        'projects': {
            'resources': {
                'locations': {
                    'methods': {
                        'get': {
                            'id': 'workflows.projects.locations.get',
                            'path': 'v1/{+name}',
                            'httpMethod': 'GET',
                            'parameters': {
                                'name': {
                                    'type': 'string',
                                    'required': True,
                                    'location': 'path',
                                    'pattern': '^projects/[^/]+/locations/[^/]+$',
                                },
                            },
                        },
                    },
                    'resources': {
                        'workflows': {
                            'methods': {
                                'patch': {
                                    'id': 'workflows.projects.locations.workflows.patch',
                                    'path': 'v1/{+name}',
                                    'httpMethod': 'PATCH',
                                    'parameters': {
                                        'name': {
                                            'type': 'string',
                                            'required': True,
                                            'location': 'path',
                                        },
                                        'updateMask': {
                                            'type': 'string',
                                            'format': 'google-fieldmask',
                                            'location': 'query',
                                        },
                                        'labels': {
                                            'type': 'object',
                                            'location': 'query',
                                            'additionalProperties': {'type': 'string'},
                                        },
                                    },
                                    'request': {'$ref': 'Workflow'},
                                },
                            },
                        },
                    },
                },
            },
        },
    },
}

COMPUTE_CONFIG_YAML = """
documents:
  - source: ./compute.v1.json
    output: ./gen
    package_name: com.google.compute.v1
    language: java
    methods:
      compute.instances.get:
        flattening:
          - parameters: [project, zone, instance]
        resource_name_treatment: static_types
        field_name_patterns:
          instance: projects/{project}/zones/{zone}/instances/{instance}
"""


def find_method(document: dict, method_id: str):
    """Return the DiscoveryMethod with ``method_id`` from a fixture document."""
    from discoview.discovery import DiscoveryApiModel, RestDescription

    api = DiscoveryApiModel(RestDescription.model_validate(document))
    for interface in api.interfaces():
        for method in interface.methods:
            if method.id == method_id:
                return method
    raise KeyError(method_id)
