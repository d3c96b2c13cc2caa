from typing import Union


class EdgeGraphError(RuntimeError):
    pass


class InputError(EdgeGraphError):
    # Graph file could not be turned into a graph
    def __init__(self, message: str, line: Union[int, None] = None) -> None:
        self.line = line
        if line is not None:
            message = f'Line {line}: {message}'
        super().__init__(message)


class QueryError(EdgeGraphError):
    pass


class RenderingUnavailable(EdgeGraphError):
    pass


class RenderingFailure(EdgeGraphError):
    def __init__(self, message: str, diagnostic: str = '') -> None:
        self.diagnostic = diagnostic
        if diagnostic:
            message = f'{message}\n{diagnostic}'
        super().__init__(message)


class ViewerFailure(EdgeGraphError):
    pass
