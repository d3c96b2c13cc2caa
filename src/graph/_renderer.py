from pathlib import Path
from typing import Union

import graphviz
from termcolor import colored

from src.data.exceptions import RenderingFailure, RenderingUnavailable, ViewerFailure


def _decode(output: Union[bytes, str, None]) -> str:
    if output is None:
        return ''
    if isinstance(output, bytes):
        output = output.decode(errors='replace')
    return output.strip()


class GraphvizRenderer:
    # Wraps the external "dot" executable and the platform image viewer


    def __init__(self, parent_context, engine: str = 'dot') -> None:
        self.parent_context = parent_context
        self.engine = engine
        self.version = None


    def checkAvailable(self) -> bool:
        # Equivalent to "dot -V"
        try:
            self.version = graphviz.version()
        except graphviz.ExecutableNotFound:
            self.parent_context.log.debug(colored('Graphviz executable not found on PATH', 'yellow'))
            return False
        except (graphviz.CalledProcessError, RuntimeError) as e:
            self.parent_context.log.debug(colored(f'Graphviz version probe failed: {e}', 'yellow'))
            return False

        self.parent_context.log.debug(f'Found Graphviz {".".join(str(x) for x in self.version)}')
        return True


    def requireAvailable(self) -> None:
        if not self.checkAvailable():
            raise RenderingUnavailable('Graphviz is not installed or is not on the PATH.')


    def render(self, dot_path: Union[str, Path], image_path: Union[str, Path], output_format: str = 'png') -> Path:
        # Equivalent to "dot -T<format> <dot_path> -o <image_path>"
        image_path = Path(image_path)
        try:
            rendered = graphviz.render(
                self.engine,
                output_format,
                str(dot_path),
                outfile=str(image_path),
            )
        except graphviz.ExecutableNotFound as e:
            raise RenderingUnavailable(f'Graphviz is not installed or is not on the PATH: {e}') from e
        except graphviz.CalledProcessError as e:
            raise RenderingFailure(
                f'Graphviz exited with status {e.returncode}',
                diagnostic=_decode(e.stderr),
            ) from e
        except ValueError as e:
            # Unknown engine or format, rejected before dot is started
            raise RenderingFailure(f'Invalid Graphviz output format "{output_format}": {e}') from e

        return Path(rendered)


    def view(self, image_path: Union[str, Path]) -> None:
        image_path = Path(image_path)
        if not image_path.exists():
            raise ViewerFailure(f'Image file not found: {image_path}')
        try:
            graphviz.view(str(image_path), quiet=True)
        except (RuntimeError, OSError) as e:
            raise ViewerFailure(f'Could not open image "{image_path}": {e}') from e
