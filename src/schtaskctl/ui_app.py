from __future__ import annotations

from typing import List

import streamlit as st

from schtaskctl.config import SchedulerConfig
from schtaskctl.core import TaskRegistry
from schtaskctl.errors import TaskError
from schtaskctl.query import TaskRecord
from schtaskctl.report import records_frame


st.set_page_config(page_title="Scheduled Tasks", layout="wide")
st.title("Windows Task Scheduler")
st.caption("Browse and manage scheduled tasks through schtasks.exe")


@st.cache_resource
def get_registry() -> TaskRegistry:
    return TaskRegistry(SchedulerConfig.from_env())


def get_tasks(registry: TaskRegistry, folder: str) -> List[TaskRecord]:
    """Return the task snapshot from session state, only reloading when needed.
    Reload when the folder changes or the invalidate flag is set.
    """
    ss = st.session_state
    if (
        ss.get("tasks_snapshot") is None
        or ss.get("tasks_folder") != folder
        or ss.get("invalidate_tasks") is True
    ):
        try:
            ss["tasks_snapshot"] = registry.list(folder)
        except TaskError as e:
            st.error(str(e))
            ss["tasks_snapshot"] = []
        ss["tasks_folder"] = folder
        ss["invalidate_tasks"] = False
    return ss["tasks_snapshot"]


registry = get_registry()

col1, col2, col3, col4, col5, col6, col7 = st.columns([1, 3, 1.2, 1.2, 1.2, 1.2, 1.2])
with col1:
    if st.button("Refresh", type="primary"):
        st.session_state["invalidate_tasks"] = True
with col2:
    folder = st.text_input("Folder", value="", placeholder="\\", label_visibility="collapsed")


def _require_selection(action: str) -> str | None:
    if not st.session_state.get("selected_task"):
        st.warning(f"Select a task in the table to {action}.")
        return None
    return st.session_state["selected_task"]


def _act(action: str, done: str, call) -> None:
    name = _require_selection(action)
    if name:
        try:
            call(name)
            st.success(f"{done} '{name}'")
            st.session_state["invalidate_tasks"] = True
        except TaskError as e:
            st.error(str(e))


with col3:
    if st.button("Run", use_container_width=True, icon="▶️"):
        _act("run", "Started", registry.run)
with col4:
    if st.button("Enable", use_container_width=True, icon="✅"):
        _act("enable", "Enabled", lambda n: registry.edit(n, "enable"))
with col5:
    if st.button("Disable", use_container_width=True, icon="🚫"):
        _act("disable", "Disabled", lambda n: registry.edit(n, "disable"))
with col6:
    if st.button("Delete", use_container_width=True, icon="🗑️"):
        name = _require_selection("delete")
        if name:
            st.session_state["confirm_delete_name"] = name
with col7:
    if st.button("Add", use_container_width=True, icon="➕"):
        st.session_state["show_add_form"] = True


@st.dialog("Add Scheduled Task", width="large")
def _add_task_dialog():  # pragma: no cover
    catalog = registry.config.catalog
    path = st.text_input("Task path", value=folder.strip("\\") + "\\" if folder.strip("\\") else "",
                         placeholder=r"Folder\MyTask")
    kind = st.selectbox("Schedule", options=catalog.names(), index=2)
    definition = catalog.lookup(kind)
    top = definition.max_modifier if definition else 0
    modifier = st.number_input("Modifier", min_value=0, max_value=top, value=min(1, top), step=1)
    command = st.text_input("Run", value="", placeholder=r"C:\path\to\program.exe")

    col_ok, col_cancel = st.columns([1, 1])
    with col_ok:
        create_clicked = st.button("Create", type="primary", use_container_width=True)
    with col_cancel:
        cancel_clicked = st.button("Cancel", use_container_width=True)

    if cancel_clicked:
        st.session_state["show_add_form"] = False
        st.rerun()

    if create_clicked:
        if not path or not command:
            st.error("Task path and Run are required.")
        else:
            try:
                registry.create(kind, str(int(modifier)), path, command)
                st.success(f"Task '{path}' created")
                st.session_state["show_add_form"] = False
                st.session_state["invalidate_tasks"] = True
                st.rerun()
            except TaskError as e:
                st.error(str(e))


@st.dialog("Confirm delete")
def _confirm_delete_dialog():  # pragma: no cover
    name = st.session_state.get("confirm_delete_name")
    if not name:
        return
    st.warning(f"Delete task '{name}'? This cannot be undone.")
    col_yes, col_no = st.columns(2)
    with col_yes:
        if st.button("Yes, delete", type="primary", use_container_width=True, icon="🗑️"):
            try:
                registry.delete(name)
                st.session_state["confirm_delete_name"] = None
                st.session_state["selected_task"] = None
                st.session_state["invalidate_tasks"] = True
                st.rerun()
            except TaskError as e:
                st.error(str(e))
    with col_no:
        if st.button("Cancel", use_container_width=True):
            st.session_state["confirm_delete_name"] = None
            st.rerun()


tasks = get_tasks(registry, folder)

if st.session_state.get("show_add_form"):
    _add_task_dialog()

if st.session_state.get("confirm_delete_name"):
    _confirm_delete_dialog()

if not tasks:
    st.info("No tasks found in this folder.")
    st.stop()

df = records_frame(tasks)

event = st.dataframe(
    df,
    use_container_width=True,
    hide_index=True,
    selection_mode="single-row",
    key="df_with_selection",
    on_select="rerun",
)

new_selected: str | None = None
rows_sel = event.selection.rows if event is not None else []
if rows_sel and 0 <= rows_sel[0] < len(df):
    new_selected = str(df.iloc[rows_sel[0]]["Task"]).strip()
st.session_state["selected_task"] = new_selected

if new_selected:
    st.subheader(f"Details: {new_selected}")
    with st.container(border=True):
        try:
            st.code(registry.report(folder, new_selected), language=None)
        except TaskError as e:
            st.error(str(e))
