# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator

from ..diff_format import op_insert, op_delete

__all__ = ["diff_sequence_bruteforce"]


def bruteforce_compare_grid(A, B, compare=operator.__eq__, hasher=None):
    """Brute force compute grid G[i][j] == compare(A[i], B[j]).

    If hasher is given, items with different hashes are taken to be
    unequal without calling compare. A hash of None means unknown, such
    items are always compared.
    """
    if hasher is None:
        return [[bool(compare(a, b)) for b in B] for a in A]
    hashes_b = [hasher(b) for b in B]
    G = []
    for a in A:
        ha = hasher(a)
        G.append([(ha is None or hb is None or hb == ha) and bool(compare(a, b)) for b, hb in zip(B, hashes_b)])
    return G


def bruteforce_cost_grid(G, M=None):
    """Brute force compute grid D[x][y] == edit distance between A[:x] and B[:y].

    Only insertions and deletions are counted, each with cost 1, given
    G[i][j] = compare(A[i], B[j]). M is len(B), needed when A is empty.
    """
    N = len(G)
    if M is None:
        M = len(G[0]) if N else 0

    D = [[0]*(M+1) for i in range(N+1)]
    for y in range(M+1):
        D[0][y] = y
    for x in range(1, N+1):
        D[x][0] = x
        for y in range(1, M+1):
            if G[x-1][y-1]:
                D[x][y] = D[x-1][y-1]
            else:
                D[x][y] = 1 + min(D[x-1][y], D[x][y-1])
    return D


def bruteforce_edit_script(A, B, G, D):
    """Backtrace the cost grid D into an edit script.

    Walks from (N, M) back to (0, 0). At any point (x, y) of the walk the
    operations that come before in application order have turned the list
    into B[:y] + A[x:], which is what the recorded indices refer to.
    Deletions win ties against insertions.
    """
    N, M = len(A), len(B)
    operations = []
    x = N
    y = M
    while x > 0 or y > 0:
        if x > 0 and y > 0 and G[x-1][y-1]:
            x -= 1
            y -= 1
        elif y == 0 or (x > 0 and D[x-1][y] <= D[x][y-1]):
            assert D[x][y] == D[x-1][y] + 1
            x -= 1
            operations.append(op_delete(y, A[x]))
        else:
            assert D[x][y] == D[x][y-1] + 1
            y -= 1
            operations.append(op_insert(y, B[y]))
    operations.reverse()
    return operations


def diff_sequence_bruteforce(A, B, compare=operator.__eq__, hasher=None):
    """Compute the minimal edit script of A and B using expensive brute force O(MN) algorithms."""
    G = bruteforce_compare_grid(A, B, compare, hasher)
    D = bruteforce_cost_grid(G, len(B))
    return bruteforce_edit_script(A, B, G, D)
