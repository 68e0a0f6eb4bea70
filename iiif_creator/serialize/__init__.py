"""
Aggregatitive summary for iiif_creator.serialize package:

''Prerequisites'': recall the resource structure of the IIIF Presentation API
at https://iiif.io/api/presentation/3.0/#21-defined-types

An IIIF document is a JSON-LD tree made of two data structures: dictionary
(JSON object) and list (JSON array). Every node of the tree is a Python
object that knows how to render itself into plain data, so that a whole
document is produced by asking its root to serialize.

As a high-level overview of the package, the following parent classes are defined first:

- `IIIFObject`: a base class for IIIF nodes that are ''dict-like''
- `DataList`: a base class for IIIF fields that are ''list-like''
- `DataDict`: a base class for IIIF fields that are ''dict-like''
- `Resource`: a base class for the resources that have an id, a type and a
  view mode (full, member data only, id only)

Then, the following classes are defined and categorized:

'''resources''':
    - `Manifest`: a compound object and its canvases
    - `Collection`: an ordered list of manifests and collections
    - `Canvas`: one view of an object
    - `Range`: a structural section over canvases
    - `Annotation`, `AnnotationPage` & `ContentResource`: content painted on canvases

'''values''':
    - `LanguageStrings`: a language map
    - `LabelValueItem` & `RequiredStatement`: label/value pairs
    - `Metadata`, `Behavior` & `Provider`: ''list-like'' descriptive fields
    - `Agent`, `Thumbnail`, `Logo` & `Reference`

'''linking''':
    - `SeeAlso`, `Rendering`, `Homepage`, `PartOf`, `ServiceItem` & `Service`

Errors raised while building or serializing are defined in
:mod:`iiif_creator.serialize.errors`.
"""
from .errors import *
from .errors import __all__ as errors_all
from .model import IIIFObject, IIIFObjectEncoder, DataList, DataDict
from .values import *
from .values import __all__ as values_all
from .linking import *
from .linking import __all__ as linking_all
from .resource import *
from .resource import __all__ as resource_all
from .annotation import *
from .annotation import __all__ as annotation_all
from .canvas import *
from .canvas import __all__ as canvas_all
from .range import *
from .range import __all__ as range_all
from .manifest import *
from .manifest import __all__ as manifest_all
from .collection import *
from .collection import __all__ as collection_all

__all__ = (errors_all + ['IIIFObject', 'IIIFObjectEncoder', 'DataList', 'DataDict']
           + values_all + linking_all + resource_all + annotation_all
           + canvas_all + range_all + manifest_all + collection_all)
