from backoffice.models.product_package import ProductPackage
from backoffice.models.state import State
from backoffice.models.city import City
from backoffice.models.district import District
