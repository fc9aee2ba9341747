"""
Console Timer Example

Runs the focus-timer core on the asyncio loop with a small terminal
presenter built from event handlers.
"""

import asyncio

from focus_timer import create_app
from focus_timer.alerts import TerminalBell
from focus_timer.events import EventHandler, EventType
from focus_timer.utils import load_config


class ConsolePresenter(EventHandler):
    """Print timer state changes."""

    def __init__(self, app):
        super().__init__()
        self.app = app

    def get_event_types(self):
        return [
            EventType.TIMER_STARTED,
            EventType.TIMER_TICKED,
            EventType.TIMER_PAUSED,
            EventType.TIMER_RESET,
            EventType.TIMER_FINISHED,
        ]

    def handle(self, event):
        view = self.app.get(event.timer_id)
        if view is None:
            return
        state = "running" if view.is_running else "stopped"
        print(f"  [{view.id}] {view.name:<12} {view.display:>7}  {view.progress:5.1f}%  {state}")


class AlarmBanner(EventHandler):
    """Show the page title whenever alarm visuals change."""

    def get_event_types(self):
        return [EventType.ALARM_STARTED, EventType.ALARM_STOPPED]

    def handle(self, event):
        banner = "🔔 " if event.show_dismiss else ""
        print(f"{banner}{event.title} (alarming: {event.active_ids or 'none'})")


async def main():
    """Create a short timer, let it finish, then dismiss the alarm."""
    config = load_config()
    config.timer.tick_interval = 0.2
    config.storage.backend = "memory"
    config.log_level = "WARNING"

    app = create_app(config, sound=TerminalBell())
    ConsolePresenter(app).attach(app.bus)
    AlarmBanner().attach(app.bus, priority=10)

    app.initialize()
    print("⏱️  Timers:", [f"{t.name} ({t.display})" for t in app.timers()])

    for raw in ["0", "12.5", "1"]:
        result = app.create("Tea", raw)
        print(f"create('Tea', {raw!r}) -> {'ok' if result.success else result.reason}")

    tea = app.timers()[-1]
    app.registry.find(tea.id).time_left = 5  # shorten the demo

    app.toggle_start_pause(tea.id)
    await asyncio.sleep(2.0)

    print(f"\nTitle: {app.title}")
    app.dismiss_alarm()

    print("\n📊 Statistics:", app.get_statistics()["alerts"])
    app.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
