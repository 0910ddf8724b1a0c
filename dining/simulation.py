"""The dining philosophers: forks, philosopher threads and the monitor."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass
from typing import TextIO

from dining.settings import Settings
from dining.timing import now_ms, precise_sleep


@dataclass(eq=False)
class Philosopher:
    """One philosopher and the two forks within reach."""

    id: int
    right_fork: threading.Lock
    left_fork: threading.Lock
    last_meal_time: int
    meals_eaten: int = 0
    thread: threading.Thread | None = None


class Simulation:
    """Runs the philosophers and a monitor that watches for starvation."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.someone_died = False
        self.print_lock = threading.Lock()
        self.forks = [threading.Lock() for _ in range(settings.num_philos)]
        self.start_time = now_ms()
        count = settings.num_philos
        self.philosophers = [
            Philosopher(
                id=i + 1,
                right_fork=self.forks[i],
                left_fork=self.forks[(i + 1) % count],
                last_meal_time=now_ms(),
            )
            for i in range(count)
        ]

    def _write(self, line: str) -> None:
        self.out.write(line + "\n")
        self.out.flush()

    def print_status(self, philosopher: Philosopher, status: str) -> None:
        """Print a status line unless the simulation has already ended in a death."""
        with self.print_lock:
            if not self.someone_died:
                self._write(f"{now_ms()} {philosopher.id} {status}")

    def check_death(self, philosopher: Philosopher) -> bool:
        """Return True if anyone has died, announcing this philosopher's death if it starved."""
        with self.print_lock:
            if self.someone_died:
                return True
            if now_ms() - philosopher.last_meal_time > self.settings.time_to_die:
                self._write(f"{now_ms() - self.start_time} {philosopher.id} died")
                self.someone_died = True
                return True
            return False

    def check_philosopher_death(self, index: int) -> bool:
        """Death check for the philosopher at ``index``."""
        return self.check_death(self.philosophers[index])

    def all_ate_enough(self) -> bool:
        """True once every philosopher has eaten the required number of meals."""
        required = self.settings.must_eat_count
        if required is None:
            return False
        return all(p.meals_eaten >= required for p in self.philosophers)

    def eat(self, philosopher: Philosopher) -> None:
        """Take both forks, eat, and put the forks back."""
        with philosopher.right_fork:
            self.print_status(philosopher, "has taken a fork")
            if self.settings.num_philos == 1:
                # A lone philosopher has only one fork and waits until starving.
                precise_sleep(self.settings.time_to_die + 10)
                return
            with philosopher.left_fork:
                self.print_status(philosopher, "has taken a fork")
                self.print_status(philosopher, "is eating")
                with self.print_lock:
                    philosopher.last_meal_time = now_ms()
                precise_sleep(self.settings.time_to_eat)
                philosopher.meals_eaten += 1

    def _has_eaten_enough(self, philosopher: Philosopher) -> bool:
        required = self.settings.must_eat_count
        return required is not None and philosopher.meals_eaten >= required

    def philosopher_routine(self, philosopher: Philosopher) -> None:
        """Eat, sleep and think until someone dies or enough meals are eaten."""
        if philosopher.id % 2 != 0:
            time.sleep(0.001)
        while True:
            if self.check_death(philosopher) or self._has_eaten_enough(philosopher):
                break
            self.eat(philosopher)
            if self.check_death(philosopher):
                break
            self.print_status(philosopher, "is sleeping")
            precise_sleep(self.settings.time_to_sleep)
            self.print_status(philosopher, "is thinking")
            time.sleep(0.0005)

    def monitor_routine(self) -> None:
        """Poll every philosopher until one dies or all have eaten enough."""
        while True:
            for index in range(len(self.philosophers)):
                if self.check_philosopher_death(index):
                    return
            if self.all_ate_enough():
                return
            time.sleep(0.001)

    def run(self) -> None:
        """Start all threads and wait for the simulation to finish."""
        self.start_time = now_ms()
        for philosopher in self.philosophers:
            philosopher.last_meal_time = self.start_time
            philosopher.thread = threading.Thread(
                target=self.philosopher_routine,
                args=(philosopher,),
                name=f"philosopher-{philosopher.id}",
            )
            philosopher.thread.start()
        monitor = threading.Thread(target=self.monitor_routine, name="monitor")
        monitor.start()
        monitor.join()
        for philosopher in self.philosophers:
            if philosopher.thread is not None:
                philosopher.thread.join()