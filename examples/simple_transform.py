import math

import numpy as np
import pyvista as pv
import quantities as q

from rigidtf import CoordinateFrame, Transform, Quaternion, Vector3, Z_AX, Y_AX


def generate_random_points(num_points):
    return np.random.rand(num_points, 3) * 0.2


def main():
    world = CoordinateFrame()
    base = world.add_child(label='base', transform=Transform.from_translation([1, 0, 0]))
    arm = base.add_child(label='arm',
                         transform=Transform(Vector3(0, 0, 1), Quaternion.from_axis_angle(Y_AX, 45 * q.deg)))
    arm.add_points(generate_random_points(100), label='random_points')

    base.rotate(Z_AX, math.pi / 4)
    print(f"arm -> world: {arm.to_root()}")
    print(f"world origin seen from arm: {world.express(Vector3(), arm)}")

    plotter = pv.Plotter()
    world.visualize(plotter=plotter, scale=0.5)
    plotter.show()


if __name__ == '__main__':
    main()
