import argparse
import logging
from multiprocessing import Manager, Process

import pygame

import gui_controller as gui_ctrl
from constants import (
    BACKGROUND, CLOTH_COLS, CLOTH_ROWS, CLOTH_SPACING, CUT_BUTTON, FPS,
    GRAB_BUTTON, HEIGHT, WHITE, WIDTH,
)
from clothsim.config import ClothConfig, ConfigurationError
from clothsim.interaction import InputEvent, InputKind
from clothsim.render import draw_mesh
from clothsim.simulation import ClothSimulation

logger = logging.getLogger(__name__)

# settings the GUI process may change, with the type they are read as
GUI_SETTINGS = {
    'iterations': int,
    'gravity': float,
    'damping': float,
    'wind_amplitude': float,
}


def collect_input(events, pointer, viewport, cut_held):
    """Translate one frame of pygame events into cloth input events."""
    out = []
    for event in events:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == GRAB_BUTTON:
            out.append(InputEvent(InputKind.GRAB_START, tuple(event.pos), viewport))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == GRAB_BUTTON:
            out.append(InputEvent(InputKind.GRAB_END, tuple(event.pos), viewport))
    if cut_held:
        out.append(InputEvent(InputKind.CUT_ACTIVE, pointer, viewport))
    return out


def apply_gui_settings(sim, shared):
    """Push GUI edits into the simulation; invalid values are logged and ignored."""
    changes = {}
    for key, cast in GUI_SETTINGS.items():
        if key in shared:
            changes[key] = cast(shared[key])
    if not changes:
        return
    try:
        sim.reconfigure(**changes)
    except ConfigurationError as e:
        logger.warning(f"Ignoring GUI settings {changes}: {e}")


def hold_paused(sim, inputs, pointer):
    """
    Apply grab and release while paused so a release is not lost, and follow
    the pointer so the first cut after resuming starts where it is now.
    """
    for e in inputs:
        if e.kind is not InputKind.CUT_ACTIVE:
            sim.controller.handle(sim.mesh, e)
    sim.controller.last_pointer = (float(pointer[0]), float(pointer[1]))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Interactive Verlet cloth")
    parser.add_argument("--rows", type=int, default=CLOTH_ROWS)
    parser.add_argument("--cols", type=int, default=CLOTH_COLS)
    parser.add_argument("--spacing", type=float, default=CLOTH_SPACING)
    parser.add_argument("--iterations", type=int, default=ClothConfig.iterations)
    parser.add_argument("--no-gui", action="store_true", help="do not start the control panel")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    sim = ClothSimulation(ClothConfig(iterations=args.iterations),
                          rows=args.rows, cols=args.cols, spacing=args.spacing)

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Cloth")
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 32)

    running = True
    paused = False

    gui_proc = None
    shared = {}
    if not args.no_gui:
        # spawn DearPyGui controller process
        mgr = Manager()
        shared = mgr.dict()
        for key in GUI_SETTINGS:
            shared[key] = getattr(sim.config, key)
        shared['__exit__'] = False
        gui_proc = Process(target=gui_ctrl.run_gui, args=(shared,), daemon=True)
        gui_proc.start()
        logger.info("Control panel started")

    start_ms = pygame.time.get_ticks()

    while running:
        frame_events = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_r:
                    sim.reset()
                elif event.key == pygame.K_SPACE:
                    paused = not paused
            else:
                frame_events.append(event)

        # --- Handle GUI updates ---
        if gui_proc is not None:
            if shared.get('__exit__', False):
                running = False
            if shared.get('toggle_pause', False):
                paused = not paused
                shared['toggle_pause'] = False
            if shared.get('reset_cloth', False):
                sim.reset()
                shared['reset_cloth'] = False
            apply_gui_settings(sim, shared)
            shared['links'] = len(sim.mesh.constraints)
            shared['grabbing'] = sim.controller.grabbing
            shared['paused'] = paused

        viewport = screen.get_size()
        pointer = pygame.mouse.get_pos()
        cut_held = pygame.mouse.get_pressed()[CUT_BUTTON - 1]
        inputs = collect_input(frame_events, pointer, viewport, cut_held)

        # --- Update ---
        if not paused:
            elapsed = (pygame.time.get_ticks() - start_ms) / 1000.0
            sim.step(elapsed, inputs, pointer, viewport)
        else:
            hold_paused(sim, inputs, pointer)

        # --- Draw ---
        screen.fill(BACKGROUND)
        draw_mesh(screen, sim.mesh, sim.camera)

        if paused:
            pause_text = font.render("PAUSED", True, WHITE)
            screen.blit(pause_text, (viewport[0] - pause_text.get_width() - 10, 10))

        count_surf = font.render(f"Links: {len(sim.mesh.constraints)}", True, WHITE)
        screen.blit(count_surf, (10, viewport[1] - 30))

        pygame.display.flip()
        clock.tick(FPS)

    # cleanup: signal GUI to exit and join
    if gui_proc is not None:
        shared['__exit__'] = True
        gui_proc.join(timeout=1.0)
        if gui_proc.is_alive():
            logger.warning("Control panel did not exit, terminating it")
            gui_proc.terminate()

    pygame.quit()


if __name__ == "__main__":
    main()
