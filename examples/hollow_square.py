"""
Example: hollow square.

Four stones at the corners of a side-2 square. At epsilon = 2 only the
sides are edges and the square encloses one hole; at epsilon = 4 the
diagonals appear, the four triangles fill it in and the hole disappears.
"""

from ripsgrid import analyze


def main():
    points = [(0, 0), (0, 2), (2, 2), (2, 0)]

    for eps in (2, 4):
        res = analyze(points, eps)
        cx = res.complex
        print(f"epsilon = {eps}: V={cx.num_vertices} E={cx.num_edges} T={cx.num_triangles}")
        print(f"  beta0 = {res.beta0}, beta1 = {res.beta1}")
        for i, edges in enumerate(res.hole_edge_sets()):
            print(f"  hole {i}: {[e.key for e in edges]}")


if __name__ == "__main__":
    main()
