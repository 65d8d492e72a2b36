"""servicemap - find-or-create and delete AWS Cloud Map services from a single declarative request."""

from .context import Context as Context
from .errors import NotFoundError as NotFoundError
from .errors import RegistryError as RegistryError
from .errors import ServiceMapError as ServiceMapError
from .errors import ValidationError as ValidationError
from .identity import Identity as Identity
from .identity import extract_identity as extract_identity
from .models import CreatedService as CreatedService
from .models import DeleteRequest as DeleteRequest
from .models import ResourcePage as ResourcePage
from .models import ServiceRecord as ServiceRecord
from .models import ServiceRequest as ServiceRequest
from .models import Tag as Tag
from .params import EnvironmentInputs as EnvironmentInputs
from .params import MappingInputs as MappingInputs
from .params import normalize as normalize
from .registry import RegistryClient as RegistryClient
from .registry import ServiceDiscoveryRegistry as ServiceDiscoveryRegistry
from .runner import run as run
from .search import find_service as find_service
from .services import ServiceRemoval as ServiceRemoval
from .services import ServiceSpec as ServiceSpec
from .spec import Removal as Removal
from .spec import Specification as Specification
from .specop import Absent as Absent
from .specop import Present as Present
