'''
File formats:

Text:
<nvertices> <nedges>
<v1> <v2> <w>
<v1> <v2> <w>
...

Binary: the same integers in the same order, each as a 4-byte
little-endian signed int. Weights must be integral.
'''
import argparse
import os
import sys

from typing import Iterator, Optional, Union

from kruskal import Edge, Graph

PathLike = Union[str, os.PathLike]

INT_SIZE = 4


def to_bin(num: int) -> bytes:
    try:
        return int(num).to_bytes(length=INT_SIZE, byteorder='little', signed=True)
    except OverflowError:
        raise ValueError(f'{num} does not fit in a {INT_SIZE}-byte signed int') from None


def _from_bin(chunk: bytes) -> int:
    return int.from_bytes(chunk, byteorder='little', signed=True)


def _parse_header(line: str) -> tuple[int, int]:
    header = line.split()
    if len(header) != 2:
        raise ValueError(f'expected "<nvertices> <nedges>" header, got {line.strip()!r}')
    return int(header[0]), int(header[1])


def read_text(fname: PathLike) -> Graph:
    with open(fname, 'r') as f:
        nvertices, nedges = _parse_header(f.readline())

        edges = []
        for line in f:
            if not line.strip():
                continue
            edges.append(Edge.from_line(line))

    if len(edges) != nedges:
        raise ValueError(f'{fname}: header declares {nedges} edges, found {len(edges)}')

    return Graph(nvertices, edges)


def write_text(graph: Graph, fname: PathLike) -> None:
    with open(fname, 'w') as f:
        f.write(f'{graph.n_vertices} {graph.n_edges}\n')
        for edge in graph.edges:
            f.write(f'{edge.u} {edge.v} {edge.weight}\n')


def _iter_ints(data: bytes) -> Iterator[int]:
    if len(data) % INT_SIZE != 0:
        raise ValueError(f'binary graph length {len(data)} is not a multiple of {INT_SIZE}')
    for offset in range(0, len(data), INT_SIZE):
        yield _from_bin(data[offset:offset + INT_SIZE])


def read_binary(fname: PathLike) -> Graph:
    with open(fname, 'rb') as f:
        ints = list(_iter_ints(f.read()))

    if len(ints) < 2:
        raise ValueError(f'{fname}: missing header')

    nvertices, nedges = ints[0], ints[1]
    body = ints[2:]
    if len(body) != 3 * nedges:
        raise ValueError(f'{fname}: header declares {nedges} edges, found {len(body) / 3:g}')

    edges = [Edge(*body[i:i + 3]) for i in range(0, len(body), 3)]
    return Graph(nvertices, edges)


def write_binary(graph: Graph, fname: PathLike) -> None:
    # nothing touches the file until every value has encoded
    chunks = [to_bin(graph.n_vertices), to_bin(graph.n_edges)]
    for edge in graph.edges:
        if edge.weight != int(edge.weight):
            raise ValueError(f'binary format only stores integer weights, got {edge!r}')
        chunks.extend(to_bin(num) for num in edge)

    with open(fname, 'wb') as f:
        f.write(b''.join(chunks))


def load_graph(fname: PathLike, binary: bool=False) -> Graph:
    if binary:
        return read_binary(fname)
    return read_text(fname)


def text_to_bin(infile_name: PathLike, outfile_name: PathLike) -> None:
    write_binary(read_text(infile_name), outfile_name)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog='graphio',
                                     description='Convert between graph formats')
    parser.add_argument('-i', '--infile', required=True)
    parser.add_argument('-o', '--outfile', required=True)

    args = parser.parse_args(argv)

    try:
        text_to_bin(args.infile, args.outfile)
    except (ValueError, OSError) as exc:
        print(f'ERROR: {exc}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
