# Standard libraries
import argparse
import logging
import os
from pathlib import Path
from typing import Literal, Union

# Pypi libraries
import yaml
from rich.console import Console
from termcolor import colored, cprint

# Internal libraries
from src.data.exceptions import (
    InputError,
    QueryError,
    RenderingFailure,
    RenderingUnavailable,
    ViewerFailure,
)
from src.data.loadGraph import graphFromFile, parseQueryVertex
from src.graph._classify import classifyAll, classifyOutgoing
from src.graph._dfs import dfsForest
from src.graph._renderer import GraphvizRenderer
from src.graph._report import (
    consoleColor,
    timestampTable,
    treeEdgeLines,
)

# Conditional imports based on OS
try: # Linux
    import readline
except Exception: # Windows
    import pyreadline3 as readline


class ProgramContext:


    def __init__(self, default_config_path: str = 'config_edge_graph.yaml', renderer=None) -> None:
        self.default_config_path = default_config_path
        self.config_overrides = {} # CLI flags, reapplied on every config reload
        self.load_graph_config(default_config_path)
        streamhandler_level = self.graph_config.get('STREAMHANDLER_LEVEL', 'INFO')

        self.log = logging.getLogger('edgegraph.log')
        self.log.setLevel(logging.DEBUG)

        if streamhandler_level == 'DEBUG':
            fmtstring = '%(pathname)s:%(lineno)s %(levelname)s %(message)s'
        else:
            fmtstring = '%(filename)s:%(lineno)s %(levelname)s %(message)s'
        formatter = logging.Formatter(
            fmt=fmtstring,
            datefmt='%Y-%m-%dT%H:%M:%S%z', # ISO 8601
        )

        handler = logging.StreamHandler() # outputs to stderr
        handler.setFormatter(formatter)
        handler.setLevel(logging.getLevelName(streamhandler_level))
        if streamhandler_level == 'DEBUG':
            # https://stackoverflow.com/a/74605301
            class PackagePathFilter(logging.Filter):
                def filter(self, record: logging.LogRecord) -> Literal[True]:
                    record.pathname = record.pathname.replace(os.getcwd(),"")
                    return True
            handler.addFilter(PackagePathFilter())

        # Replace handlers left behind by an earlier context in the same process
        for old_handler in list(self.log.handlers):
            self.log.removeHandler(old_handler)
        self.log.addHandler(handler)

        self.renderer = renderer if renderer is not None else GraphvizRenderer(self)
        self.console = Console()


    def load_graph_config(self, config_path: str) -> None:
        with open(config_path, 'r') as f:
            self.graph_config = yaml.safe_load(f) or {}
        self.graph_config.update(self.config_overrides)


    def print_report(self, G, forest, vertex: int) -> None:
        cprint('\nTree edges found:', 'blue')
        for line in treeEdgeLines(forest):
            print(line)

        cprint(f'\nClassification of the outgoing edges of vertex {vertex}:', 'blue')
        if not 1 <= vertex <= G.num_vertices:
            self.log.warning(colored(f'Vertex {vertex} is not in the graph (vertices are 1..{G.num_vertices})', 'yellow'))
            outgoing = []
        else:
            outgoing = classifyOutgoing(G, vertex, forest)
        for edge in outgoing:
            cprint(str(edge), consoleColor(edge.kind, self.graph_config))

        if self.graph_config.get('PRINT_ALL_EDGES', False):
            cprint('\nClassification of every edge:', 'blue')
            for edge in classifyAll(G, forest):
                cprint(str(edge), consoleColor(edge.kind, self.graph_config))

        if self.graph_config.get('PRINT_TIMESTAMPS', False):
            self.console.print(timestampTable(G, forest))


    def render_graph(self, G, forest, graph_name: str) -> Union[Path, None]:
        output_dir = Path(self.graph_config.get('OUTPUT_DIRECTORY', 'output'))
        output_format = self.graph_config.get('OUTPUT_FORMAT', 'png')
        dot_path = output_dir / f'{graph_name}.dot'

        try:
            G.writeDot(forest, dot_path, self.graph_config)
        except OSError as e:
            self.log.error(colored(f'Error writing DOT file "{dot_path}": {e}', 'red'))
            return None
        cprint(f'\nDOT file generated: {dot_path}', 'green')

        if not self.graph_config.get('RENDER_IMAGE', True):
            return None

        image_path = output_dir / f'{graph_name}.{output_format}'
        try:
            self.renderer.requireAvailable()
            image_path = self.renderer.render(dot_path, image_path, output_format)
        except RenderingUnavailable as e:
            self.log.error(colored(f'Skipping image generation: {e}', 'red'))
            return None
        except RenderingFailure as e:
            self.log.error(colored(f'Error generating image: {e}', 'red'))
            return None
        cprint(f'\nGraph image generated: {image_path}', 'green')

        if self.graph_config.get('VIEW_ON_COMPLETION', False):
            try:
                self.renderer.view(image_path)
            except ViewerFailure as e:
                self.log.warning(colored(str(e), 'yellow'))

        return image_path


    def generate_one(self, graph_path: str, raw_vertex: str) -> bool:
        # Query is checked first so a bad vertex never costs a graph load
        try:
            vertex = parseQueryVertex(raw_vertex)
        except QueryError as e:
            self.log.error(colored(str(e), 'red'))
            return False

        try:
            G = graphFromFile(graph_path)
        except InputError as e:
            self.log.error(colored(f'Error reading graph file "{graph_path}": {e}', 'red'))
            return False

        self.log.debug(f'Loaded {G}')
        G.sortAdjacency()
        forest = dfsForest(G)

        self.print_report(G, forest, vertex)
        self.render_graph(G, forest, Path(graph_path).stem)
        return True


    def run_noninteractive(self, graph_path: str, raw_vertex: str) -> bool:
        ok = self.generate_one(graph_path, raw_vertex)
        cprint('Done.' if ok else 'Finished with errors.', 'green' if ok else 'red')
        return ok


    def run_interactive(self) -> None:
        readline.parse_and_bind('tab: complete')
        readline.set_completer_delims('')

        def completer(text: str, state: int) -> Union[str, None]:
            prefix = ''
            suffix = text
            if '/' in text:
                parts = text.split('/')
                prefix = '/'.join(parts[:-1]) + '/'
                suffix = parts[-1]

            target_path = Path(prefix) if prefix else Path('.')
            if not target_path.is_dir():
                return None
            valid_completions = sorted(x for x in os.listdir(target_path) if x.startswith(suffix))
            if state < len(valid_completions):
                completion = prefix + valid_completions[state]
                if (target_path / valid_completions[state]).is_dir():
                    completion += '/'
                return completion
            else:
                return None

        readline.set_completer(completer)

        while True:
            try:
                cprint('Please enter the graph file path (tab autocomplete allowed)', 'blue')
                graph_path = input(colored('> ', 'green'))
                cprint('Please enter the vertex whose outgoing edges should be classified', 'blue')
                raw_vertex = input(colored('> ', 'green'))
            except (EOFError, KeyboardInterrupt):
                print()
                break

            self.load_graph_config(self.default_config_path)
            self.run_noninteractive(graph_path, raw_vertex)


    def run(self) -> None:

        parser = argparse.ArgumentParser(description='Classify DFS edges of a directed graph and render it with Graphviz.')
        parser.add_argument('--config', type=str, default=self.default_config_path, help='Path to the global .yaml configuration file.')
        parser.add_argument('--interactive', action='store_true', help='Force interactive mode.')
        parser.add_argument('--no_view_on_completion', action='store_true', help='Override the VIEW_ON_COMPLETION config setting to False.')
        parser.add_argument('--no_render', action='store_true', help='Only write the .dot file, do not call Graphviz.')
        parser.add_argument('--all_edges', action='store_true', help='Also print the classification of every edge in the graph.')
        parser.add_argument('--timestamps', action='store_true', help='Print the discovery/finish time table.')
        parser.add_argument('graph_file', type=str, nargs='?', help='Graph file: "<N> <M>" header followed by M "<u> <v>" lines.')
        parser.add_argument('vertex', type=str, nargs='?', help='Vertex whose outgoing edges are classified.')

        args = parser.parse_args()

        overrides = {
            'VIEW_ON_COMPLETION': (args.no_view_on_completion, False),
            'RENDER_IMAGE': (args.no_render, False),
            'PRINT_ALL_EDGES': (args.all_edges, True),
            'PRINT_TIMESTAMPS': (args.timestamps, True),
        }
        for key, (flag, value) in overrides.items():
            if flag:
                self.config_overrides[key] = value

        self.default_config_path = args.config
        self.load_graph_config(args.config)

        # No graph given means the old prompt-driven behaviour
        if args.graph_file is None:
            args.interactive = True

        if args.interactive:
            if args.graph_file is not None:
                raise RuntimeError('A graph file cannot be specified in interactive mode.')
            self.run_interactive()
        else:
            if args.vertex is None:
                parser.error('a vertex number is required when a graph file is given')
            self.run_noninteractive(args.graph_file, args.vertex)


if __name__ == '__main__':
    pc = ProgramContext()
    pc.run()
