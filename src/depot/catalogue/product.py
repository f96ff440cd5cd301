"""Product value object — one catalogue entry with its unit mass."""

from protean.fields import Integer, String

from depot.domain import depot


@depot.value_object
class Product:
    """A catalogue product. Every unit of it weighs ``mass_g`` grams."""

    product_id = Integer(required=True, min_value=0)
    name = String(required=True, max_length=100)
    mass_g = Integer(required=True, min_value=1)
