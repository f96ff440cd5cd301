"""CatalogEntry aggregate — the persisted form of one catalogue product."""

from protean.fields import Integer, String

from depot.catalogue.product import Product
from depot.domain import depot


@depot.aggregate
class CatalogEntry:
    product_id = Integer(identifier=True)
    name = String(required=True, max_length=100)
    mass_g = Integer(required=True, min_value=1)

    @classmethod
    def register(cls, product: Product) -> "CatalogEntry":
        return cls(product_id=product.product_id, name=product.name, mass_g=product.mass_g)

    def revise(self, product: Product) -> None:
        """Overwrite name and mass with a newer catalogue listing."""
        self.name = product.name
        self.mass_g = product.mass_g

    def to_product(self) -> Product:
        return Product(product_id=self.product_id, name=self.name, mass_g=self.mass_g)
