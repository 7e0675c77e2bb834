import logging
import string

import numpy as np
import pyvista as pv
import matplotlib.pyplot as plt

from .transformations import Quaternion, Transform, Vector3, compose, invert, apply, apply_points
from .utils import X_AX, Y_AX, Z_AX

logger = logging.getLogger(__name__)


def _free_label(used):
    for label in string.ascii_uppercase:
        if label not in used:
            return label
    raise ValueError("No free automatic label left, pass one explicitly")


class CoordinateFrame:
    """
    A node in a tree of coordinate frames.

    Each frame stores the rigid transform from its local frame into its
    parent's frame. Children and labelled point sets are expressed in local
    coordinates, so they follow the frame whenever it is moved.
    """
    def __init__(self, transform: Transform = None):
        if transform is None:
            self._transform = Transform()
        else:
            self._transform = transform

        self._parent = None
        self._children = {}
        self._points = {}

    @property
    def transform(self):
        return self._transform

    @transform.setter
    def transform(self, value):
        self._transform = value

    @property
    def position(self):
        return self._transform.position

    @property
    def rotation(self):
        return self._transform.rotation

    @property
    def children(self):
        return self._children

    @property
    def points(self):
        return self._points

    def get_parent(self):
        """
        Get the parent frame if this is a child.
        Returns None if this is a root frame.
        """
        return self._parent

    def has_child(self, label):
        return label in self._children

    def add_child(self, child=None, label=None, transform=None):
        if child is None:
            child = CoordinateFrame()
        if child is self or self.root() is child:
            raise ValueError("Frame cannot be attached below itself")
        if child.get_parent() is not None:
            raise ValueError("Frame is already attached to a parent")
        if label is None:
            label = _free_label(self._children)
        if label in self._children:
            raise ValueError(f"Child label {label!r} is already in use")
        if transform is not None:
            child.transform = transform

        # Store a reference to the parent
        child._parent = self
        self._children[label] = child
        logger.debug("Attached frame %r at %s", label, child.transform)

        return child

    def remove_child(self, label):
        child = self._children.pop(label)
        child._parent = None
        logger.debug("Detached frame %r", label)
        return child

    def add_points(self, points, label=None):
        if label is None:
            label = _free_label(self._points)
        elif label in self._points:
            raise ValueError(f"Point set label {label!r} is already in use")
        self._points[label] = np.asarray(points, dtype=np.float64)

    def remove_points(self, label):
        if label in self._points:
            del self._points[label]
            return True
        return False

    def get_points(self, label=None):
        if label is None:
            return self._points
        return self._points[label]

    def global_points(self, label):
        """Points of the set `label` expressed in the root frame."""
        return apply_points(self.to_root(), self._points[label])

    def root(self):
        frame = self
        while frame.get_parent() is not None:
            frame = frame.get_parent()
        return frame

    def to_root(self):
        """Transform from this frame into the root frame of the tree."""
        tf = self._transform
        parent = self.get_parent()
        while parent is not None:
            tf = compose(parent.transform, tf)
            parent = parent.get_parent()
        return tf

    def transform_to(self, other):
        """Transform mapping points expressed in this frame into `other`."""
        if self.root() is not other.root():
            raise ValueError("Frames do not belong to the same tree")
        return compose(invert(other.to_root()), self.to_root())

    def express(self, point, other):
        return apply(self.transform_to(other), Vector3.from_array(point))

    def translate(self, offset, label=None):
        if label is not None:
            self._children[label].translate(offset)
            return
        self._transform = compose(Transform.from_translation(offset), self._transform)

    def rotate(self, axis, angle, pivot=None, label=None):
        '''
        Rotate the frame about an axis by an angle.
        The axis and the pivot are given in the parent frame; the pivot
        defaults to the parent's origin.
        If label is not None, the child labeled `label` will be rotated.
        '''
        if label is not None:
            self._children[label].rotate(axis, angle, pivot)
            return

        rotation = Transform.from_rotation(Quaternion.from_axis_angle(axis, angle))
        if pivot is None:
            self._transform = compose(rotation, self._transform)
            return
        pivot = Vector3.from_array(pivot)
        about_pivot = compose(Transform.from_translation(pivot),
                              compose(rotation, Transform.from_translation(-pivot)))
        self._transform = compose(about_pivot, self._transform)

    def rotate_local(self, axis, angle, label=None):
        if label is not None:
            self._children[label].rotate_local(axis, angle)
            return
        rotation = Quaternion.from_axis_angle(axis, angle)
        self._transform = compose(self._transform, Transform.from_rotation(rotation))

    def __str__(self):
        return f"CoordinateFrame({self._transform})"

    def visualize(self, plotter=None, cmap='viridis', scale=1.0, inherit=True, show_points=True):
        if plotter is None:
            plotter = pv.Plotter()

        colors = plt.get_cmap(cmap)(np.linspace(0, 1, 3))
        tf = self.to_root()
        origin = tf.position.to_array()
        for axis, color in zip((X_AX, Y_AX, Z_AX), colors):
            direction = (tf.rotation * axis).to_array()
            plotter.add_arrows(origin, direction, mag=scale, color=color)
        plotter.add_points(origin[np.newaxis, :], color='black')

        # Plot points if requested
        if show_points and self._points:
            # Use a different colormap for points to distinguish from axes
            point_colors = plt.get_cmap('tab10')(np.linspace(0, 1, len(self._points)))

            for i, label in enumerate(self._points):
                color = point_colors[i % len(point_colors)]
                plotter.add_points(self.global_points(label), color=color, point_size=10,
                                   render_points_as_spheres=True)

        if inherit:
            for child in self._children.values():
                child.visualize(plotter, cmap=cmap, scale=scale, show_points=show_points)

        return plotter
