"""
Example: Betti numbers of a random board across thresholds.

Places stones at random on a 9x9 board and evaluates each epsilon
independently. beta0 can only drop as epsilon grows; beta1 can go either
way as loops form and then get filled by triangles.
"""

from ripsgrid import betti_curve, random_points


def main():
    points = random_points(9, 14, seed=2024)
    print(f"{len(points)} stones: {[p.key for p in points]}")

    print("\n eps |   E |    T | beta0 | beta1")
    print("-----+-----+------+-------+------")
    for res in betti_curve(points, range(1, 8)):
        cx = res.complex
        print(f" {res.epsilon:3d} | {cx.num_edges:3d} | {cx.num_triangles:4d} | {res.beta0:5d} | {res.beta1:5d}")


if __name__ == "__main__":
    main()
