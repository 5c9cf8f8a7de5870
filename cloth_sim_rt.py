"""
cloth_sim_rt.py (interactive 2D)
--------------------------------
* Drapes a pinned cloth over a circle and a rectangle in real time
* Slider for wind strength, buttons for pause / reset / pin corners / unpin all
* Click near a point to toggle its pin
* Plots the cloth and its maximum stretch over time
* --headless runs a fixed number of steps without opening a window
"""

import argparse
import logging
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.collections import LineCollection
from matplotlib.patches import Circle as CirclePatch, Rectangle as RectPatch
from matplotlib.widgets import Button, Slider
from collections import deque

from clothsim import Simulation
from clothsim.config import add_arguments, config_from_args
from clothsim.logging_config import setup_logging

logger = logging.getLogger("clothsim")

# Colours
EDGE_COLOR = (0.58, 0.64, 0.72, 0.6)
FREE_COLOR = '#334155'
PINNED_COLOR = '#10b981'
CIRCLE_COLOR = (0.23, 0.51, 0.96, 0.25)
RECT_COLOR = (0.93, 0.28, 0.60, 0.3)
MAX_WIND = 120


class ClothView:
    """Matplotlib front end over a Simulation. Reads mesh state, never integrates itself."""

    def __init__(self, sim, fps=60, window=10.0):
        self.sim = sim
        self.fps = fps
        buffer_size = int(window * fps)
        self.frame_buffer, self.stretch_buffer = (deque(maxlen=buffer_size) for _ in range(2))

        cfg = sim.config
        self.fig = plt.figure(figsize=(11, 5.5))
        gs = self.fig.add_gridspec(1, 2, width_ratios=[3, 1], wspace=0.2,
                                   bottom=0.22)

        # --- Cloth subplot ---
        ax = self.ax_cloth = self.fig.add_subplot(gs[0])
        ax.set_xlim(0, cfg.width)
        ax.set_ylim(cfg.height, 0)  # screen coordinates, y down
        ax.set_aspect('equal')
        ax.set_xticks([]); ax.set_yticks([])

        circle, rect = sim.obstacles.circle, sim.obstacles.rectangle
        ax.add_patch(CirclePatch((circle.x, circle.y), circle.radius, color=CIRCLE_COLOR))
        ax.add_patch(RectPatch((rect.x, rect.y), rect.width, rect.height, color=RECT_COLOR))

        self.edges = LineCollection(sim.mesh.segments(), colors=[EDGE_COLOR], linewidths=0.8)
        ax.add_collection(self.edges)
        self.nodes = ax.scatter(*sim.mesh.positions.T, s=self._sizes(), c=self._colors(), zorder=3)

        # --- Stretch subplot ---
        ax_s = self.ax_stretch = self.fig.add_subplot(gs[1])
        ax_s.set_xlabel('frame')
        ax_s.set_ylabel('max stretch')
        self.line_stretch, = ax_s.plot([], [], lw=1)

        # Controls
        ax_wind = self.fig.add_axes([.15, .1, .55, .03])
        self.slider_wind = Slider(ax_wind, 'Wind', 0, MAX_WIND, valinit=sim.wind_strength)
        self.slider_wind.on_changed(self.on_wind)

        self.buttons = []
        for i, (label, callback) in enumerate((('Pause', self.on_pause),
                                               ('Reset', self.on_reset),
                                               ('Pin corners', self.on_pin_corners),
                                               ('Unpin all', self.on_unpin_all))):
            button = Button(self.fig.add_axes([.15 + i * .15, .02, .13, .05]), label)
            button.on_clicked(callback)
            self.buttons.append(button)

        self.fig.canvas.mpl_connect('button_press_event', self.on_click)
        self.anim = None

    def _colors(self):
        return np.where(self.sim.mesh.pinned, PINNED_COLOR, FREE_COLOR)

    def _sizes(self):
        return np.where(self.sim.mesh.pinned, 10.0, 4.0)

    def redraw(self):
        mesh = self.sim.mesh
        self.edges.set_segments(mesh.segments())
        self.nodes.set_offsets(mesh.positions)
        self.nodes.set_color(self._colors())
        self.nodes.set_sizes(self._sizes())

    def update(self, _):
        self.sim.step()
        if not self.sim.is_finite():
            logger.error("Simulation diverged at frame %d; stopping.", self.sim.frame)
            if self.anim is not None:
                self.anim.event_source.stop()
            return self.edges, self.nodes

        if not self.sim.paused:
            self.frame_buffer.append(self.sim.frame)
            self.stretch_buffer.append(self.sim.mesh.max_stretch())
            self.line_stretch.set_data(list(self.frame_buffer), list(self.stretch_buffer))
            self.ax_stretch.set_xlim(self.frame_buffer[0], max(self.frame_buffer[-1], self.frame_buffer[0] + 1))
            self.ax_stretch.set_ylim(min(0.0, min(self.stretch_buffer)),
                                     max(self.stretch_buffer) * 1.2 + 1e-6)

        self.redraw()
        return self.edges, self.nodes, self.line_stretch

    def on_wind(self, val):
        self.sim.wind_strength = val

    def on_pause(self, _event):
        self.sim.paused = not self.sim.paused
        self.buttons[0].label.set_text('Resume' if self.sim.paused else 'Pause')
        self.fig.canvas.draw_idle()

    def on_reset(self, _event):
        self.sim.reset()
        self.frame_buffer.clear()
        self.stretch_buffer.clear()
        self.redraw()
        self.fig.canvas.draw_idle()

    def on_pin_corners(self, _event):
        self.sim.pin_corners()
        self.redraw()
        self.fig.canvas.draw_idle()

    def on_unpin_all(self, _event):
        self.sim.unpin_all()
        self.redraw()
        self.fig.canvas.draw_idle()

    def on_click(self, event):
        if event.inaxes is not self.ax_cloth or event.xdata is None:
            return
        index = self.sim.pick((event.xdata, event.ydata))
        if index is not None:
            self.sim.toggle_pin(index)
            self.redraw()
            self.fig.canvas.draw_idle()

    def show(self):
        # Keep a reference so the animation isn't garbage collected
        self.anim = FuncAnimation(self.fig, self.update,
                                  interval=1000 / self.fps,
                                  blit=False,
                                  cache_frame_data=False)
        plt.show()


def run_headless(sim, steps):
    """Step ``sim`` ``steps`` times without drawing; return the final max stretch."""
    for _ in range(steps):
        sim.step()
        if not sim.is_finite():
            logger.error("Simulation diverged at frame %d.", sim.frame)
            break
    max_stretch = sim.mesh.max_stretch()
    logger.info("Ran %d frames; max stretch %.4f.", sim.frame, max_stretch)
    return max_stretch


def build_parser():
    parser = argparse.ArgumentParser(description=__doc__,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    add_arguments(parser)
    add = parser.add_argument
    add('--fps',      type=int,   default=60)
    add('--window',   type=float, default=10.0)
    add('--headless', action='store_true')
    add('--steps',    type=int,   default=600)
    add('--log_file', type=str,   default=None)
    add('--quiet',    action='store_true')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file, quiet=args.quiet)

    sim = Simulation(config_from_args(args))
    if args.headless:
        run_headless(sim, args.steps)
        return

    view = ClothView(sim, fps=args.fps, window=args.window)
    view.show()


if __name__ == '__main__':
    main()
