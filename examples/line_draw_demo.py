from hexlattice import Grid, Hex, depth_first_search, line_draw

start = Hex(0, 0)
goal = Hex(5, -2)

region = Grid.from_coordinates(
    [(q, r) for q in range(-1, 7) for r in range(-3, 2)],
    {"size": (12, 12), "gutter": 2},
)


if __name__ == "__main__":
    line = line_draw(start, goal)
    print("line:", ", ".join(str(h) for h in line))
    print("distance:", start.distance(goal))
    print("grid:", region, f"{region.width:.1f}x{region.height:.1f}px")
    order = depth_first_search(region)
    print("dfs from", order[0], "to", order[-1])
