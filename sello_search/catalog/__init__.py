from .products import ProductCatalog, ProductMatch

__all__ = ["ProductCatalog", "ProductMatch"]
