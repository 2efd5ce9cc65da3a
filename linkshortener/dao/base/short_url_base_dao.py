"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism (e.g., Redis, DynamoDB, PostgreSQL).

Responsibilities:
    - Allocate unique, monotonically increasing identifiers for new links.
    - Provide an interface for inserting and retrieving ShortURLModel objects.
    - Standardize error handling across multiple data store implementations.

Implementations must rely on the data store itself for atomicity: identifier
allocation has to be an atomic increment in the store, and the shortcode has
to be unique at the storage level. No in-process locking is assumed.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from linkshortener.models import ShortURLModel
        >>> from linkshortener.dao import ShortURLRedisDAO

        >>> dao = ShortURLRedisDAO(...)

        >>> dao.allocate_identifier()
        12378

        >>> short_url = ShortURLModel(
        ...     target="https://example.com/blog/article-123",
        ...     shortcode="3dE",
        ...     identifier=12378,
        ... )
        >>> dao.insert(short_url)

        >>> retrieved = dao.get("3dE")
        >>> print(retrieved.target)
        https://example.com/blog/article-123

        >>> print(dao.get("missing"))
        None
"""

from abc import ABC, abstractmethod

from linkshortener.models import ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        allocate_identifier(**kwargs) -> int:
            Atomically allocate the next identifier.
            Raises DataStoreError on connection or write failure.

        insert(short_url: ShortURLModel, **kwargs) -> ShortURLBaseDAO:
            Insert a new ShortURLModel into the data store.
            Raises ShortURLAlreadyExistsError if the short code already exists.
            Raises DataStoreError on connection or write failure.

        get(shortcode: str, **kwargs) -> ShortURLModel | None:
            Retrieve a ShortURLModel from the data store by short code.
            Returns None if not found.
            Raises DataStoreError on connection or read failure.

        count(**kwargs) -> int:
            Return the last allocated identifier without allocating a new one.
            Raises DataStoreError on connection or read failure.

    Subclassing:
        Datastore-specific implementations (e.g., ShortURLRedisDAO) must extend
        this class and implement all abstract methods.

    NOTE:
        - Mappings are immutable once inserted. The DAO does not provide an
          interface to update or delete entries.
    """

    @abstractmethod
    def allocate_identifier(self, **kwargs) -> int:
        """Allocate a new identifier, strictly greater than all previous ones.

        Args:
            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: The freshly allocated identifier.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLBaseDAO':
        """Insert a new ShortURLModel into the data store.

        Args:
            short_url (ShortURLModel):
                The ShortURLModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLBaseDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If a ShortURLModel with the same short code already exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> ShortURLModel | None:
        """Retrieve a ShortURLModel from the data store by its short code.

        Args:
            shortcode (str):
                The short code of the ShortURLModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel | None: The ShortURLModel instance if found, otherwise None.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def count(self, **kwargs) -> int:
        """Retrieve the last allocated identifier.

        Args:
            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: The current counter value (0 if nothing was allocated yet).

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
