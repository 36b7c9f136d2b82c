#!/usr/bin/env python3
"""
Headless Race Example

This example demonstrates how to:
1. Build a car and race state without opening a window
2. Drive the frame loop with scripted inputs
3. Bounce off a wall described by a GridMask
4. Trigger laps from a simple rule and watch the win banner blink

The car spawns just below the top wall and keeps its foot down, so it
repeatedly hits the wall and bounces back. A lap is counted every 150
frames; after two laps the race is won and the banner starts blinking.

Run with: python run_headless.py
"""

import logging

from tuxkart import Car, FrameLoop, RaceState
from tuxkart.car import CarInputs
from tuxkart.scoring import RaceConfig
from tuxkart.simulation import LoopConfig
from tuxkart.track import GridMask

FRAMES = 480
LAP_FRAMES = 150


class ScriptedInput:
    """Accelerate straight ahead for a fixed number of frames."""

    def __init__(self, frames: int):
        self.frames = frames
        self.count = 0

    def poll_quit(self) -> bool:
        return self.count >= self.frames

    def sample(self) -> CarInputs:
        self.count += 1
        return CarInputs(accelerate=True)


class CountingWall:
    """Obstacle mask wrapper that counts contacts."""

    def __init__(self, mask: GridMask):
        self.mask = mask
        self.hits = 0

    def overlap(self, footprint):
        contact = self.mask.overlap(footprint)
        if contact is not None:
            self.hits += 1
        return contact


class PrintRenderer:
    """Prints a status line every 30 frames."""

    def __init__(self, wall: CountingWall):
        self.wall = wall

    def draw(self, view) -> None:
        if view.frame % 30 == 0:
            banner = "PLAYER 1 HAS WON" if view.banner_visible else ""
            print(f"   Frame {view.frame:4d}: pos=({view.car.x:6.1f}, {view.car.y:6.1f}) "
                  f"bounces={self.wall.hits:3d} laps={view.lap_count} {banner}")

    def present(self) -> None:
        pass


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")

    print("=" * 60)
    print("tuxkart Headless Race Example")
    print("=" * 60)

    car = Car(start=(920.0, 200.0))
    race = RaceState(RaceConfig(lap_target=2))
    wall = CountingWall(GridMask.from_rects((2560, 1440), [(0, 0, 2560, 40)]))

    def timed_lap(car: Car) -> bool:
        return race.frames > 0 and race.frames % LAP_FRAMES == 0

    loop = FrameLoop(
        car,
        race,
        PrintRenderer(wall),
        ScriptedInput(frames=FRAMES),
        obstacles=wall,
        lap_trigger=timed_lap,
        config=LoopConfig(frame_rate=600.0),
    )
    frames = loop.run()

    print(f"\nPlayed {frames} frames with {wall.hits} bounces, "
          f"final pos=({car.position[0]:.1f}, {car.position[1]:.1f})")
    print(f"Race state: {race.get_state()}")


if __name__ == "__main__":
    main()
