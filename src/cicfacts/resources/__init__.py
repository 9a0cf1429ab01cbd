from cicfacts.resources.icsurvey import Icsurvey
from cicfacts.resources.raw_resource import RawResource

__all__ = ["Icsurvey", "RawResource"]
