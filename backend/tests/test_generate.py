import copy

import pytest

from jsonapi_openapi.config import Config, parse_config
from jsonapi_openapi.errors import DuplicateComponentError, InvalidOperationError, UnexpectedOperationError
from jsonapi_openapi.openapi import generate
from jsonapi_openapi.openapi_parts.endpoints import path
from jsonapi_openapi.openapi_parts.naming import operation_method

BASE_URL = 'https://api.example.com/v1'


def _collect_refs(node, found):
    if isinstance(node, dict):
        for key, value in node.items():
            if key == '$ref':
                found.append(value)
            else:
                _collect_refs(value, found)
    elif isinstance(node, list):
        for item in node:
            _collect_refs(item, found)
    return found


def _resolve(doc, ref):
    assert ref.startswith('#/'), ref
    node = doc
    for part in ref[2:].split('/'):
        assert isinstance(node, dict) and part in node, f"dangling $ref {ref}"
        node = node[part]
    return node


def test_pet_scenario_without_pagination():
    config = parse_config({'resources': {'pet': {
        'plural': 'pets',
        'operations': ['get', 'getById', 'post'],
        'attributes': {'name': {'type': 'string'}},
        'paginate': False,
    }}})
    doc = generate(config, BASE_URL)
    assert set(doc['paths']) == {'/pets', '/pets/{petId}'}
    assert set(doc['paths']['/pets']) == {'get', 'post'}
    assert set(doc['paths']['/pets/{petId}']) == {'get'}
    schemas = doc['components']['schemas']
    for name in ['PetGetResource', 'PetResult', 'PetSetResult', 'PetPostResource', 'PetPostBody']:
        assert name in schemas, f"missing schema {name}"
    assert 'Meta' not in schemas
    assert 'PaginationLinks' not in schemas
    assert doc['components']['parameters'] == {'petId': doc['components']['parameters']['petId']}


def test_pet_scenario_to_many_relationship():
    config = parse_config({'resources': {'pet': {
        'operations': ['get'],
        'relationships': {'siblings': {'relationshipType': 'toMany', 'type': 'pet'}},
    }}})
    doc = generate(config, BASE_URL)
    rel_path = '/pets/{petId}/relationships/siblings'
    assert set(doc['paths'][rel_path]) == {'get', 'patch', 'post', 'delete'}
    assert 'PetPetRelationshipSet' in doc['components']['schemas']
    assert 'PetPetRelationshipSetResult' in doc['components']['schemas']


def test_owner_patch_scenario():
    config = parse_config({'resources': {'owner': {'operations': ['patchById']}}})
    doc = generate(config, BASE_URL)
    op = doc['paths']['/owners/{ownerId}']['patch']
    assert op['operationId'] == 'patchOwnerById'
    assert operation_method('patchById') == 'patch'


def test_required_post_attributes_scenario():
    config = parse_config({'resources': {'pet': {
        'operations': ['post'],
        'requiredPostAttributes': ['name'],
        'attributes': {'name': {'type': 'string'}, 'species': {'type': 'string'}},
    }}})
    doc = generate(config, BASE_URL)
    body = doc['components']['schemas']['PetPostBody']
    resource = _resolve(doc, body['properties']['data']['$ref'])
    attrs = resource['properties']['attributes']
    assert attrs['required'] == ['name']
    assert 'species' in attrs['properties']


def test_paths_and_methods_follow_operations(pet_config):
    doc = generate(pet_config, BASE_URL)
    for name, resource in pet_config.resources.items():
        expected = {}
        for op in resource.operations:
            expected.setdefault(path(op, resource.plural, name), set()).add(operation_method(op))
        for p, methods in expected.items():
            assert set(doc['paths'][p]) == methods, p
    rel_paths = [p for p in doc['paths'] if '/relationships/' in p]
    resource_paths = [p for p in doc['paths'] if '/relationships/' not in p]
    assert len(rel_paths) == 2
    assert len(resource_paths) == 4


def test_operation_ids_unique(pet_config):
    doc = generate(pet_config, BASE_URL)
    ids = [op['operationId'] for item in doc['paths'].values() for op in item.values()]
    assert len(ids) == len(set(ids))


def test_operation_ids_unique_across_resources():
    config = parse_config({'resources': {
        'pet': {'operations': ['get', 'getById'], 'relationships': {
            'owner': {'relationshipType': 'toOne', 'type': 'petOwner'},
        }},
        'petOwner': {'operations': ['get', 'getById'], 'relationships': {
            'pets': {'relationshipType': 'toMany', 'type': 'pet'},
        }},
    }})
    doc = generate(config, BASE_URL)
    ids = [op['operationId'] for item in doc['paths'].values() for op in item.values()]
    assert len(ids) == len(set(ids))


def test_colliding_relationship_operation_ids_are_refused():
    config = parse_config({'resources': {
        'pet': {'relationships': {'ownerSiblings': {'relationshipType': 'toMany', 'type': 'pet'}}},
        'petOwner': {'relationships': {'siblings': {'relationshipType': 'toMany', 'type': 'petOwner'}}},
    }})
    with pytest.raises(DuplicateComponentError) as exc:
        generate(config, BASE_URL)
    assert exc.value.section == 'operationIds'
    assert exc.value.key == 'getPetOwnerSiblingsRelationship'


def test_relationship_keys_that_run_together_are_refused():
    config = parse_config({'resources': {
        'user': {'relationships': {'groupMember': {'relationshipType': 'toOne', 'type': 'groupMember'}}},
        'userGroup': {'relationships': {'member': {'relationshipType': 'toOne', 'type': 'member'}}},
        'groupMember': {},
        'member': {},
    }})
    with pytest.raises(DuplicateComponentError) as exc:
        generate(config, BASE_URL)
    assert exc.value.key == 'UserGroupMemberRelationship'


def test_generate_is_idempotent(pet_config_data):
    first = generate(parse_config(copy.deepcopy(pet_config_data)), BASE_URL)
    config = parse_config(pet_config_data)
    assert generate(config, BASE_URL) == generate(config, BASE_URL) == first


def test_every_reference_resolves(pet_config):
    doc = generate(pet_config, BASE_URL)
    refs = _collect_refs(doc, [])
    assert refs
    for ref in refs:
        _resolve(doc, ref)


def test_references_resolve_with_external_relationship_target():
    config = parse_config({'resources': {'pet': {
        'operations': ['get', 'post'],
        'relationships': {'vet': {'relationshipType': 'toOne', 'type': 'vet'}},
    }}})
    doc = generate(config, BASE_URL)
    for ref in _collect_refs(doc, []):
        _resolve(doc, ref)


def test_pagination_sections_present_once(pet_config_data):
    pet_config_data['resources']['owner']['paginate'] = True
    doc = generate(parse_config(pet_config_data), BASE_URL)
    components = doc['components']
    assert {'Meta', 'PaginationLinks'} <= set(components['schemas'])
    assert {'pageNumber', 'pageSize'} <= set(components['parameters'])
    page_params = [k for k in components['parameters'] if k.startswith('page')]
    assert page_params == ['pageNumber', 'pageSize']


def test_no_pagination_sections_without_paginating_resource(pet_config_data):
    pet_config_data['resources']['pet']['paginate'] = False
    doc = generate(parse_config(pet_config_data), BASE_URL)
    assert 'Meta' not in doc['components']['schemas']
    assert 'pageNumber' not in doc['components']['parameters']
    assert 'meta' not in doc['components']['schemas']['PetSetResult']['properties']


def test_document_metadata(pet_config):
    doc = generate(pet_config, BASE_URL + '/')
    assert doc['openapi'] == '3.0.0'
    assert doc['info'] == {'title': 'Pet Store', 'description': 'Pets and owners', 'version': 'v1'}
    assert doc['servers'] == [{'url': BASE_URL}]
    assert doc['externalDocs']['url'] == 'https://github.com/example/pets'
    assert doc['security'] == [{'OAuth2': ['full']}]
    flow = doc['components']['securitySchemes']['OAuth2']['flows']['clientCredentials']
    assert flow['tokenUrl'] == 'https://api.example.com/oauth2/token'
    assert [t['name'] for t in doc['tags']] == ['pets', 'owners']


def test_sub_resources_are_not_rendered():
    config = parse_config({'resources': {
        'pet': {'operations': ['getById'], 'subResources': {'previousOwners': {'resource': 'owner', 'many': True}}},
        'owner': {},
    }})
    doc = generate(config, BASE_URL)
    assert not any('previousOwners' in p for p in doc['paths'])


def test_invalid_tokens_abort_generation():
    config = Config.model_validate({'resources': {'pet': {'operations': ['get']}}})
    config.resources['pet'].operations = ['get', 'fetchAll']
    with pytest.raises(UnexpectedOperationError):
        generate(config, BASE_URL)
    config.resources['pet'].operations = ['FetchAll']
    with pytest.raises(InvalidOperationError):
        generate(config, BASE_URL)


def test_colliding_schema_prefixes_are_refused():
    config = parse_config({'resources': {'pet': {}, 'Pet': {'plural': 'bigpets'}}})
    with pytest.raises(DuplicateComponentError):
        generate(config, BASE_URL)
