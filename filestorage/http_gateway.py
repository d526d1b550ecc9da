"""HTTP gateway for communicating with the storage contract service."""

import uuid
from typing import List, Optional

import httpx

from common.codec import RawChunk
from common.exceptions import GatewayUnavailableError, error_from_code
from common.logging_config import get_logger
from common.types import FileRecord
from filestorage.gateway import StorageGateway

logger = get_logger(__name__)


class HttpStorageGateway(StorageGateway):
    """
    Async HTTP client for the storage contract API.

    Remote failures are raised as the exception class matching the error
    code in the response body. Requests are never retried: a repeated
    chunk write would be rejected by the contract anyway.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the gateway.

        Args:
            base_url: Contract service URL (e.g., "http://localhost:8000")
            timeout: Per-request timeout in seconds
            transport: Optional transport override (testing)
        """
        self.base_url = base_url
        self.session = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport
        )
        logger.info(f"Initialized HttpStorageGateway [base_url={base_url}]")

    async def _request(self, method: str, endpoint: str, **kwargs) -> dict:
        """
        Send a request and decode its JSON body.

        Raises:
            GatewayUnavailableError: If the service cannot be reached
            FilestorageError: Subclass matching the remote error code
        """
        request_id = str(uuid.uuid4())
        kwargs.setdefault('headers', {})['X-Request-ID'] = request_id

        logger.debug(f"Making request: {method} {endpoint} [request_id={request_id}]")

        try:
            response = await self.session.request(method, endpoint, **kwargs)
        except httpx.ConnectError as e:
            logger.error(f"Network error: {method} {endpoint} error={e} [request_id={request_id}]")
            raise GatewayUnavailableError("Cannot connect to storage contract. Is it running?") from e
        except httpx.TimeoutException as e:
            logger.error(f"Request timed out: {method} {endpoint} [request_id={request_id}]")
            raise GatewayUnavailableError("Request to storage contract timed out") from e
        except httpx.RequestError as e:
            logger.error(f"Transport error: {method} {endpoint} error={e} [request_id={request_id}]")
            raise GatewayUnavailableError(f"Lost connection to storage contract: {e}") from e

        logger.debug(
            f"Response received: {method} {endpoint} status={response.status_code} [request_id={request_id}]"
        )

        if response.status_code >= 400:
            try:
                error_data = response.json()
                detail = error_data.get('detail', 'Unknown error')
                code = error_data.get('code')
            except ValueError:
                detail = response.text or 'Unknown error'
                code = None
            logger.warning(
                f"Contract error: {method} {endpoint} status={response.status_code} "
                f"code={code} [request_id={request_id}]"
            )
            raise error_from_code(code, str(detail))

        return response.json()

    async def start_upload(self, owner: str, file_name: str, size: int) -> None:
        await self._request(
            'POST',
            '/uploads',
            json={'owner': owner, 'file_name': file_name, 'size': size}
        )

    async def upload_chunk(self, owner: str, file_name: str, position: int, data: str) -> None:
        await self._request(
            'POST',
            '/uploads/chunks',
            json={'owner': owner, 'file_name': file_name, 'position': position, 'data': data}
        )

    async def finish_upload(self, owner: str, file_name: str) -> None:
        await self._request(
            'POST',
            '/uploads/finish',
            json={'owner': owner, 'file_name': file_name}
        )

    async def delete_file(self, owner: str, file_name: str) -> None:
        await self._request(
            'DELETE',
            '/files',
            params={'owner': owner, 'file_name': file_name}
        )

    async def get_file_size(self, storage_path: str) -> int:
        data = await self._request(
            'GET',
            '/files/size',
            params={'storage_path': storage_path}
        )
        return int(data['size'])

    async def read_chunk(self, storage_path: str, position: int, length: int) -> RawChunk:
        data = await self._request(
            'GET',
            '/files/chunk',
            params={'storage_path': storage_path, 'position': position, 'length': length}
        )
        return data['words']

    async def get_file_info_list(self, owner: str) -> List[FileRecord]:
        data = await self._request('GET', '/files', params={'owner': owner})
        return [
            FileRecord(
                name=item['name'],
                size=item['size'],
                is_chunk_uploaded=tuple(item['is_chunk_uploaded']),
            )
            for item in data['files']
        ]

    async def close(self) -> None:
        """Close the HTTP session."""
        await self.session.aclose()
