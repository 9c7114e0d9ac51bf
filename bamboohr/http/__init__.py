from bamboohr.http.executor import HTTPXRequestExecutor, RequestExecutorProtocol
from bamboohr.http.request import HTTPRequest

__all__ = ["HTTPRequest", "HTTPXRequestExecutor", "RequestExecutorProtocol"]
