"""Application service: Query Catalog use case (query)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.catalog_query import SortKey, filter_and_sort


class QueryCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        search_term: str = "",
        sort_key: SortKey | str | None = SortKey.NONE,
    ) -> list[ProductDTO]:
        products = filter_and_sort(self._product_repo.list_all(), search_term, sort_key)
        return [self.to_dto(p) for p in products]

    @staticmethod
    def to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=str(product.price),
            image=product.image,
            description=product.description,
            category=product.category,
        )
