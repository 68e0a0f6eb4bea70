from importlib.resources import files

import json

import jsonschema.validators

# DO NOT CHANGE THIS ORDER, important to prevent circular imports
from iiif_creator.ver import __version__
from iiif_creator.ver import __specver__
from iiif_creator.vocabulary import *
from iiif_creator.serialize import *
from iiif_creator.serialize.model import IIIFObjectEncoder

_res_pkg = 'res'
_schema_res_name = 'presentation3.json'


def get_iiif_json_schema():
    return files(f'{__package__}.{_res_pkg}').joinpath(_schema_res_name).read_text()


def generate(resource, pretty: bool = True, validate: bool = False) -> str:
    """
    Serializes a root resource into an IIIF JSON document.

    :param resource: the top-level Manifest or Collection (or any other resource)
    :param pretty: indent the output with two spaces
    :param validate: check the document against the bundled JSON schema first
    :return: the JSON text
    :raises IIIFError: when the resource graph breaks a construction rule
    :raises jsonschema.exceptions.ValidationError: when ``validate`` is set and the document does not conform
    """
    document = resource._serialize()
    if validate:
        jsonschema.validators.validate(document, json.loads(get_iiif_json_schema()))
    return json.dumps(document, indent=2 if pretty else None, ensure_ascii=False, cls=IIIFObjectEncoder)
