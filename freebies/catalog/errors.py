class CatalogError(Exception):
    pass


class CatalogFetchError(CatalogError):
    pass


class CatalogPayloadError(CatalogFetchError):
    pass
