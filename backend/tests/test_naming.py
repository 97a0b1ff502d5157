from types import SimpleNamespace

import pytest

from jsonapi_openapi.errors import InvalidOperationError
from jsonapi_openapi.openapi_parts.naming import (
    camel_case,
    id_parameter_name,
    is_id_operation,
    operation_id,
    operation_method,
    relationship_operation_id,
    relationship_schema_prefix,
    schema_prefix,
    split_operation,
    split_words,
)


def test_schema_prefix_capitalizes_first_letter_only():
    assert schema_prefix('pet') == 'Pet'
    assert schema_prefix('petOwner') == 'PetOwner'
    assert schema_prefix('petowner') != schema_prefix('petOwner')


def test_operation_method_is_leading_verb():
    assert operation_method('get') == 'get'
    assert operation_method('getById') == 'get'
    assert operation_method('patchById') == 'patch'
    assert operation_method('deleteById') == 'delete'


@pytest.mark.parametrize('token', ['GetById', '', '123', 'ById'])
def test_operation_method_rejects_tokens_without_verb(token):
    with pytest.raises(InvalidOperationError):
        operation_method(token)


def test_split_operation():
    assert split_operation('get') == ('get', [])
    assert split_operation('patchById') == ('patch', ['By', 'Id'])


def test_operation_ids():
    pets = SimpleNamespace(plural='pets')
    owners = SimpleNamespace(plural='owners')
    assert operation_id('get', 'pet', pets) == 'getPets'
    assert operation_id('getById', 'pet', pets) == 'getPetById'
    assert operation_id('post', 'pet', pets) == 'postPet'
    assert operation_id('deleteById', 'pet', pets) == 'deletePetById'
    assert operation_id('patchById', 'owner', owners) == 'patchOwnerById'


def test_operation_ids_for_irregular_names():
    resource = SimpleNamespace(plural='pet_owners')
    assert operation_id('get', 'petOwner', resource) == 'getPetOwners'
    assert operation_id('getById', 'petOwner', resource) == 'getPetOwnerById'


def test_camel_case_normalises_acronyms():
    assert camel_case('get', 'URLThing') == 'getUrlThing'


def test_id_and_relationship_names():
    assert id_parameter_name('pet') == 'petId'
    assert is_id_operation('patchById')
    assert not is_id_operation('post')
    assert relationship_schema_prefix('pet', 'owner') == 'PetOwnerRelationship'
    assert relationship_operation_id('get', 'pet', 'siblings') == 'getPetSiblingsRelationship'


def test_camel_case_keeps_non_ascii_letters():
    assert camel_case('get', 'cafés') == 'getCafés'
    assert camel_case('get', 'Éclair', 'ById') == 'getÉclairById'
    assert operation_id('get', 'café', SimpleNamespace(plural='cafés')) == 'getCafés'


def test_split_words():
    assert split_words('petOwner') == ['pet', 'Owner']
    assert split_words('URLThing') == ['URL', 'Thing']
    assert split_words('pet_2owners') == ['pet', '2', 'owners']
