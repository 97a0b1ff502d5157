import os, sys, copy, pytest
# Ensure the backend directory is on path so 'jsonapi_openapi' imports without installing
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from jsonapi_openapi import create_app
from jsonapi_openapi.config import parse_config

BASE_URL = 'https://api.example.com/v1'

PET_CONFIG = {
    'title': 'Pet Store',
    'description': 'Pets and owners',
    'version': 'v1',
    'externalDocsUrl': 'https://github.com/example/pets',
    'resources': {
        'pet': {
            'plural': 'pets',
            'paginate': True,
            'operations': ['get', 'getById', 'post', 'patchById', 'deleteById'],
            'filterParams': {'name': ['eq', 'fuzzy'], 'yearsOwned': ['gt', 'lt']},
            'requiredPostAttributes': ['name'],
            'attributes': {
                'name': {'type': 'string'},
                'species': {'type': 'string'},
                'yearsOwned': {'type': 'number', 'format': 'float', 'maximum': 999},
            },
            'relationships': {
                'owner': {'relationshipType': 'toOne', 'type': 'owner'},
                'siblings': {'relationshipType': 'toMany', 'type': 'pet'},
            },
        },
        'owner': {
            'operations': ['get', 'getById'],
            'attributes': {'name': {'type': 'string'}, 'email': {'type': 'string', 'format': 'email'}},
        },
    },
}


@pytest.fixture()
def pet_config_data():
    return copy.deepcopy(PET_CONFIG)


@pytest.fixture()
def pet_config(pet_config_data):
    return parse_config(pet_config_data)


@pytest.fixture(scope='session')
def app_instance():
    app = create_app({'GENERATOR_SPEC': copy.deepcopy(PET_CONFIG), 'GENERATOR_BASE_URL': BASE_URL})
    yield app


@pytest.fixture()
def client(app_instance):
    return app_instance.test_client()
