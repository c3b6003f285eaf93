import time
import dearpygui.dearpygui as dpg


def _make_callbacks(shared):
    def iters_cb(sender, app_data, user_data):
        shared['iterations'] = int(app_data)
    def gravity_cb(sender, app_data, user_data):
        shared['gravity'] = float(app_data)
    def damping_cb(sender, app_data, user_data):
        shared['damping'] = float(app_data)
    def wind_cb(sender, app_data, user_data):
        shared['wind_amplitude'] = float(app_data)
    def pause_cb():
        shared['toggle_pause'] = True
    def reset_cb():
        shared['reset_cloth'] = True
    def exit_cb():
        shared['__exit__'] = True
    return iters_cb, gravity_cb, damping_cb, wind_cb, pause_cb, reset_cb, exit_cb


def run_gui(shared):
    """
    Run DearPyGui in its own process. Writes values into `shared` dict.
    """
    dpg.create_context()

    iters_cb, gravity_cb, damping_cb, wind_cb, pause_cb, reset_cb, exit_cb = _make_callbacks(shared)

    with dpg.window(label="Cloth Controls", tag="controls_window", width=380, height=360):
        dpg.add_text("Solver")
        dpg.add_spacer()
        dpg.add_text("Relaxation iterations (higher = stiffer)")
        dpg.add_slider_int(label="Iterations", tag="iters_slider", default_value=int(shared.get('iterations', 8)),
                           min_value=1, max_value=50, callback=iters_cb)
        dpg.add_separator()
        dpg.add_text("Forces")
        dpg.add_slider_float(label="Gravity", tag="gravity_slider", default_value=float(shared.get('gravity', 0.35)),
                             min_value=0.0, max_value=2.0, callback=gravity_cb)
        dpg.add_slider_float(label="Damping", tag="damping_slider", default_value=float(shared.get('damping', 0.98)),
                             min_value=0.0, max_value=0.999, callback=damping_cb)
        dpg.add_slider_float(label="Wind", tag="wind_slider", default_value=float(shared.get('wind_amplitude', 0.15)),
                             min_value=0.0, max_value=1.0, callback=wind_cb)
        dpg.add_separator()
        dpg.add_button(label="Pause / Toggle", callback=lambda s, a, u: pause_cb())
        dpg.add_button(label="Reset Cloth", callback=lambda s, a, u: reset_cb())
        dpg.add_button(label="Exit", callback=lambda s, a, u: exit_cb())
        dpg.add_spacer()
        dpg.add_text("Status:", tag="status_label")
        dpg.add_text("", tag="status_text")

    dpg.create_viewport(title='Cloth Controls', width=400, height=400)
    dpg.set_primary_window("controls_window", True)
    dpg.setup_dearpygui()
    dpg.show_viewport()

    try:
        while not shared.get('__exit__', False) and dpg.is_dearpygui_running():
            status = (f"links={shared.get('links', 0)}, iters={shared.get('iterations', 8)}, "
                      f"grabbing={shared.get('grabbing', False)}, paused={shared.get('paused', False)}")
            dpg.set_value("status_text", status)
            dpg.render_dearpygui_frame()
            time.sleep(0.01)
    finally:
        dpg.destroy_context()


if __name__ == "__main__":
    from multiprocessing import Manager
    mgr = Manager()
    shared = mgr.dict()
    shared['iterations'] = 8
    shared['gravity'] = 0.35
    run_gui(shared)
