"""
Batch Pipeline - Offline LCA over a Tree Described in a File

Ties the library together:
1. Load configuration (YAML, with defaults)
2. Build the static graph from an edge list
3. Validate it as a tree rooted at the configured vertex
4. Answer a batch of LCA queries in one pass
5. Emit the answers, optionally ordered by pair

Batch documents are YAML (JSON is accepted too):

    n_vert: 5
    root: 3            # optional, overrides the config
    edges: [[3, 2], [2, 1], [0, 2], [4, 3]]
    queries: [[1, 0], [1, 4]]

Usage:
    python pipeline.py --batch batch.yaml
    python pipeline.py --batch batch.yaml --root 2 --config config.yaml
"""

import argparse
import json
import logging
import os
import sys
import time
from typing import Dict, Iterable, List, Optional, Tuple

import yaml

from config import load_config, setup_logging
from errors import ConfigError, GraphError
from lca_offline import OfflineLCA, canonical_pair
from mergesort import mergesort
from rooted_tree import RootedTree
from static_graph import StaticGraph

logger = logging.getLogger(__name__)

Pair = Tuple[int, int]


def _int(value, name: str, path: Optional[str]) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{name}' must be an integer, got {value!r}", path)
    return value


def _pairs(value, name: str, path: Optional[str]) -> List[Pair]:
    if not isinstance(value, list):
        raise ConfigError(f"'{name}' must be a list of pairs", path)
    pairs = []
    for item in value:
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            raise ConfigError(f"'{name}' entry {item!r} is not a pair", path)
        pairs.append((_int(item[0], name, path), _int(item[1], name, path)))
    return pairs


def load_batch(batch_path: str) -> Dict:
    """
    Load a batch document.

    Returns:
        Dict with n_vert, edges, queries and root (None if absent)

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If a required key is missing or malformed
    """
    if not os.path.exists(batch_path):
        raise FileNotFoundError(f"Batch file not found: {batch_path}")

    with open(batch_path, 'r') as f:
        try:
            doc = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML: {e}", batch_path) from e

    if not isinstance(doc, dict):
        raise ConfigError("batch must be a mapping", batch_path)
    for key in ('n_vert', 'edges', 'queries'):
        if key not in doc:
            raise ConfigError(f"missing key '{key}'", batch_path)

    root = doc.get('root')
    return {
        'n_vert': _int(doc['n_vert'], 'n_vert', batch_path),
        'edges': _pairs(doc['edges'], 'edges', batch_path),
        'queries': _pairs(doc['queries'], 'queries', batch_path),
        'root': None if root is None else _int(root, 'root', batch_path),
    }


class LCAPipeline:
    """
    Build a rooted tree once, then answer query batches against it.
    """

    def __init__(self, config_path: Optional[str] = None, config: Optional[Dict] = None):
        self.config = config if config is not None else load_config(config_path)
        self.graph = None
        self.tree = None
        self.n_queries = 0

    def build(self, n_vert: int, edges: Iterable[Pair], root: Optional[int] = None) -> RootedTree:
        """
        Build graph and tree.

        Args:
            n_vert: Number of vertices
            edges: Tree edges
            root: Root vertex (defaults to config pipeline.root)

        Raises:
            NotATreeError: If the edges do not form a tree
        """
        if root is None:
            root = self.config['pipeline']['root']

        start_time = time.time()
        self.graph = StaticGraph(n_vert, edges)
        self.tree = RootedTree(self.graph, root)
        build_time = time.time() - start_time

        logger.info(f"Built tree with {self.tree.n_vert()} vertices rooted at {root} "
                    f"in {build_time*1000:.2f}ms")
        return self.tree

    def query(self, queries: Iterable[Pair]) -> OfflineLCA:
        """Answer a batch of queries against the built tree."""
        if self.tree is None:
            raise ValueError("Tree not built. Run build first.")

        queries = list(queries)
        start_time = time.time()
        lca = OfflineLCA(self.tree, queries)
        self.n_queries = len(queries)

        logger.info(f"Answered {len(queries)} queries in {(time.time() - start_time)*1000:.2f}ms")
        return lca

    def run(self, batch: Dict) -> List[Dict]:
        """
        Build from a batch document and answer its queries.

        Returns:
            One record per distinct pair: {'pair': [a, b], 'ancestor': x}
        """
        self.build(batch['n_vert'], batch['edges'], batch.get('root'))
        lca = self.query(batch['queries'])

        pairs = list(dict.fromkeys(canonical_pair(v, u) for v, u in batch['queries']))
        if self.config['pipeline'].get('sort_output', True):
            pairs = mergesort(pairs)

        return [{'pair': list(pair), 'ancestor': lca.ancestor(*pair)} for pair in pairs]

    def stats(self) -> Dict:
        """Statistics about the built tree and the last batch."""
        if self.tree is None:
            return {'built': False}
        return {
            'built': True,
            'n_vert': self.tree.n_vert(),
            'n_edges': self.tree.n_edges(),
            'root': self.tree.root(),
            'height': self.tree.height(),
            'n_queries': self.n_queries,
        }


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Offline LCA queries on a tree')
    parser.add_argument('--batch', type=str, required=True,
                        help='YAML/JSON file with n_vert, edges, queries and optional root')
    parser.add_argument('--config', type=str, default=None,
                        help='YAML configuration file')
    parser.add_argument('--root', type=int, default=None,
                        help='Root vertex (overrides batch and config)')

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        setup_logging(config)
        batch = load_batch(args.batch)
    except (ConfigError, FileNotFoundError) as e:
        parser.error(str(e))

    if args.root is not None:
        batch['root'] = args.root

    pipeline = LCAPipeline(config=config)
    try:
        results = pipeline.run(batch)
    except GraphError as e:
        logger.error(f"Batch failed: {e}")
        return 1

    print(json.dumps({'results': results, 'stats': pipeline.stats()}, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
