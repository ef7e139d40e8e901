from .categories import router as categories_router
from .employees import router as employees_router
from .products import router as products_router
from .sales import router as sales_router
from .stores import router as stores_router
