"""Streamlit UI for campus-dashboard."""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from datetime import date
from typing import Any

from campus_dashboard import budget as budget_rules
from campus_dashboard import tasks as task_rules
from campus_dashboard.cgpa import calculate_cgpa, parse_subject
from campus_dashboard.community import MessageFeed, compose, initials
from campus_dashboard.config import load_config
from campus_dashboard.dashboard import build_overview, build_tracker_payload
from campus_dashboard.errors import BackendError, SessionTooShortError
from campus_dashboard.pomodoro import LONG_BREAK, SHORT_BREAK, WORK, PomodoroSettings, PomodoroTimer
from campus_dashboard.profile import ACADEMIC_YEARS, avatar_initials, display_name, edit_profile, headline, parse_gpa
from campus_dashboard.repositories import (
    InMemoryBudgetRepository,
    InMemoryCourseRepository,
    InMemoryMessageRepository,
    InMemoryProfileRepository,
    InMemorySessionRepository,
    InMemoryTaskRepository,
    SupabaseBudgetRepository,
    SupabaseCourseRepository,
    SupabaseMessageRepository,
    SupabaseProfileRepository,
    SupabaseSessionRepository,
    SupabaseTaskRepository,
    create_supabase_client,
    sessions_for_tracker,
)
from campus_dashboard.schema import Budget, BudgetCategory, Course, Expense, Profile, Task
from campus_dashboard.stopwatch import StudyStopwatch
from campus_dashboard.theme import COLOR_THEMES, ThemeContext
from campus_dashboard.tracker import format_minutes, sessions_on

logger = logging.getLogger(__name__)

HEATMAP_COLORS = ["#ebedf0", "#a7f3d0", "#34d399", "#10b981", "#059669"]
DARK_HEATMAP_COLORS = ["#2d333b", "#064e3b", "#047857", "#059669", "#10b981"]
PRIORITIES = ["Low", "Medium", "High"]
COMMUNITY_POLL_SECONDS = 5


class SessionStateStore:
    """KeyValueStore over ``st.session_state`` so preferences survive reruns."""

    def __init__(self, state: Any, prefix: str = "pref_") -> None:
        self.state = state
        self.prefix = prefix

    def get(self, key: str):
        return self.state.get(self.prefix + key)

    def set(self, key: str, value: str) -> None:
        self.state[self.prefix + key] = value


def _secrets(st) -> dict:
    try:
        return dict(st.secrets)
    except FileNotFoundError:
        return {}


def _repositories(st) -> dict[str, Any]:
    if "repos" in st.session_state:
        return st.session_state["repos"]

    config = load_config(_secrets(st))
    if config.enabled:
        client = create_supabase_client(config.url, config.anon_key)
        repos = {
            "mode": "supabase",
            "client": client,
            "sessions": SupabaseSessionRepository(client),
            "tasks": SupabaseTaskRepository(client),
            "courses": SupabaseCourseRepository(client),
            "budget": SupabaseBudgetRepository(client),
            "messages": SupabaseMessageRepository(client),
            "profiles": SupabaseProfileRepository(client),
        }
    else:
        logger.info("Supabase is not configured; using in-memory storage")
        repos = {
            "mode": "local",
            "sessions": InMemorySessionRepository(),
            "tasks": InMemoryTaskRepository(),
            "courses": InMemoryCourseRepository(),
            "budget": InMemoryBudgetRepository(),
            "messages": InMemoryMessageRepository(),
            "profiles": InMemoryProfileRepository(),
        }
    st.session_state["repos"] = repos
    return repos


def heatmap_html(levels, dark: bool = False) -> str:
    """Render the 7-row level grid as small colored squares."""

    colors = DARK_HEATMAP_COLORS if dark else HEATMAP_COLORS
    columns = []
    for col in range(levels.shape[1]):
        cells = []
        for row in range(levels.shape[0]):
            level = int(levels[row, col])
            color = "transparent" if level < 0 else colors[level]
            cells.append(f'<div style="width:11px;height:11px;margin:1px;border-radius:2px;background:{color}"></div>')
        columns.append(f'<div style="display:flex;flex-direction:column">{"".join(cells)}</div>')
    return f'<div style="display:flex;overflow-x:auto">{"".join(columns)}</div>'


def _user(st, repos: dict) -> tuple[str | None, str]:
    """Sign-in widgets; returns the user id and the email (or local name)."""

    with st.sidebar:
        if repos["mode"] == "supabase":
            if st.session_state.get("user_id"):
                st.success(f"Signed in as {st.session_state['user_email']}")
                if st.button("Sign out"):
                    repos["client"].auth.sign_out()
                    for key in ("user_id", "user_email", "stopwatch", "message_feed"):
                        st.session_state.pop(key, None)
                    st.rerun()
            else:
                email = st.text_input("Email")
                password = st.text_input("Password", type="password")
                if st.button("Sign in", type="primary"):
                    try:
                        auth = repos["client"].auth.sign_in_with_password({"email": email, "password": password})
                        st.session_state["user_id"] = str(auth.user.id)
                        st.session_state["user_email"] = email
                        st.rerun()
                    except Exception as exc:  # noqa: BLE001
                        st.error(f"Sign in failed: {exc}")
        else:
            name = st.text_input("Your name", value=st.session_state.get("user_email", "student"))
            st.session_state["user_id"] = name.strip().lower() or None
            st.session_state["user_email"] = name.strip() or "student"
    return st.session_state.get("user_id"), st.session_state.get("user_email", "")


def _overview_tab(st, repos: dict, user_id: str, user_name: str) -> None:
    overview = build_overview(
        repos["tasks"].for_user(user_id),
        repos["courses"].for_user(user_id),
        repos["budget"].list_budgets(user_id),
        repos["budget"].list_expenses(user_id),
    )
    st.subheader(f"Welcome back, {user_name}!")
    st.caption(date.today().strftime("%A, %B %d, %Y"))
    c1, c2, c3, c4, c5, c6 = st.columns(6)
    c1.metric("Total Tasks", overview["total_tasks"])
    c2.metric("Completed", overview["completed_tasks"])
    c3.metric("Courses", overview["total_courses"])
    c4.metric("Due Soon", overview["upcoming_deadlines"])
    currency = st.session_state.get("currency", budget_rules.DEFAULT_CURRENCY)
    c5.metric("Budget", budget_rules.format_amount(overview["total_budget"], currency))
    c6.metric("Expenses", budget_rules.format_amount(overview["total_expenses"], currency))


def _tasks_tab(st, repos: dict, user_id: str) -> None:
    repo = repos["tasks"]
    with st.form("new_task", clear_on_submit=True):
        title = st.text_input("Title")
        description = st.text_area("Description")
        due = st.date_input("Due date", value=date.today())
        priority = st.selectbox("Priority", PRIORITIES, index=1)
        if st.form_submit_button("Add Task") and title.strip():
            repo.add(Task(None, user_id, title.strip(), due, description.strip(), priority))

    search = st.text_input("Search tasks")
    f1, f2 = st.columns(2)
    status = f1.selectbox("Status", ["all", "active", "completed"])
    priority = f2.selectbox("Priority filter", ["all"] + PRIORITIES)
    for task in task_rules.filter_tasks(repo.for_user(user_id), search, status, priority):
        cols = st.columns([6, 2, 1, 1])
        overdue = " (overdue)" if task_rules.is_overdue(task) and task.status == "active" else ""
        cols[0].write(f"**{task.title}** [{task.priority}] due {task.due_date:%b %d}{overdue}")
        cols[1].write(task.status)
        if cols[2].button("Toggle", key=f"toggle_{task.id}"):
            repo.update(task_rules.toggle_status(task))
            st.rerun()
        if cols[3].button("Delete", key=f"delete_{task.id}"):
            repo.delete(user_id, task.id)
            st.rerun()
        with st.expander("Edit"), st.form(f"edit_task_{task.id}"):
            new_title = st.text_input("Title", value=task.title)
            new_description = st.text_area("Description", value=task.description)
            new_due = st.date_input("Due date", value=task.due_date)
            new_priority = st.selectbox("Priority", PRIORITIES, index=PRIORITIES.index(task.priority))
            if st.form_submit_button("Update Task") and new_title.strip():
                repo.update(
                    replace(
                        task,
                        title=new_title.strip(),
                        description=new_description.strip(),
                        due_date=new_due,
                        priority=new_priority,
                    )
                )
                st.rerun()


def _course_form(st, key: str, course: Course | None = None) -> dict | None:
    """Course fields from a form; None until submitted with every required field."""

    with st.form(key, clear_on_submit=course is None):
        name = st.text_input("Course name", value=course.name if course else "")
        code = st.text_input("Code", value=course.code if course else "")
        instructor = st.text_input("Instructor", value=course.instructor if course else "")
        schedule = st.text_input("Schedule", value=course.schedule if course else "")
        credits = st.number_input("Credits", min_value=1, max_value=10, value=course.credits if course else 3, step=1)
        location = st.text_input("Location", value=(course.location or "") if course else "")
        if not st.form_submit_button("Update Course" if course else "Add Course"):
            return None
    if not (name.strip() and code.strip() and instructor.strip() and schedule.strip()):
        st.warning("Name, code, instructor and schedule are required.")
        return None
    return {
        "name": name.strip(),
        "code": code.strip(),
        "instructor": instructor.strip(),
        "schedule": schedule.strip(),
        "credits": int(credits),
        "location": location.strip() or None,
    }


def _courses_tab(st, repos: dict, user_id: str) -> None:
    repo = repos["courses"]
    fields = _course_form(st, "new_course")
    if fields is not None:
        repo.add(Course(None, user_id, **fields))

    courses = repo.for_user(user_id)
    if not courses:
        st.info("No courses yet.")
    for course in courses:
        cols = st.columns([8, 1])
        cols[0].write(f"**{course.code}** {course.name} | {course.instructor} | {course.schedule} | {course.credits} cr")
        if cols[1].button("Delete", key=f"delete_course_{course.id}"):
            repo.delete(user_id, course.id)
            st.rerun()
        with st.expander("Edit"):
            fields = _course_form(st, f"edit_course_{course.id}", course)
            if fields is not None:
                repo.update(replace(course, **fields))
                st.rerun()


def _tracker_tab(st, repos: dict, user_id: str, dark: bool) -> None:
    if "stopwatch" not in st.session_state or st.session_state["stopwatch"].user_id != user_id:
        st.session_state["stopwatch"] = StudyStopwatch(repos["sessions"], user_id)
    watch: StudyStopwatch = st.session_state["stopwatch"]

    st.subheader("Study Timer")

    @st.fragment(run_every=1 if watch.is_running else None)
    def _clock() -> None:
        st.markdown(f"## `{watch.display()}`  {'Studying...' if watch.is_running else 'Ready'}")

    _clock()
    b1, b2 = st.columns(2)
    if not watch.is_running and b1.button("Start", type="primary", disabled=watch.pending is not None):
        watch.start()
        st.rerun()
    if watch.is_running and b1.button("Pause"):
        watch.pause()
        st.rerun()
    if b2.button("Stop & Save", disabled=watch.elapsed_seconds == 0 or watch.pending is not None):
        try:
            watch.stop()
        except SessionTooShortError:
            st.warning("Session too short. Study for at least 1 minute to save.")
        st.rerun()

    if watch.pending is not None:
        st.success(f"Session complete! {watch.pending.duration_minutes} minutes studied")
        notes = st.text_area("What did you study?")
        s1, s2 = st.columns(2)
        if s1.button("Save Session", type="primary"):
            saved = watch.save(notes)
            st.toast(f"Session saved! {saved.duration_minutes} minutes recorded.")
            st.rerun()
        if s2.button("Discard"):
            watch.discard()
            st.rerun()

    sessions = sessions_for_tracker(repos["sessions"], user_id)
    payload = build_tracker_payload(sessions)
    summary = payload["summary"]
    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Total Hours", summary["total_hours"])
    m2.metric("Sessions", summary["sessions"])
    m3.metric("Avg/Session", f"{summary['avg_minutes_per_session']}m")
    m4.metric("Current Streak", f"{summary['current_streak']}d")

    st.subheader("Yearly Study Progress")
    st.markdown(heatmap_html(payload["levels"], dark), unsafe_allow_html=True)

    day = st.date_input("Show sessions for", value=date.today(), key="tracker_day")
    day_sessions = sessions_on(sessions, day)
    if day_sessions:
        st.write(f"{sum(s.duration_minutes for s in day_sessions)} min total")
        for session in day_sessions:
            st.write(f"- {session.duration_minutes} minutes {session.notes or ''}")
    else:
        st.caption("No study sessions on this day.")

    st.subheader("Study Analytics")
    weekly_tab, monthly_tab = st.tabs(["Weekly View", "Monthly View"])
    with weekly_tab:
        weekly = payload["weekly"]
        w1, w2, w3, w4 = st.columns(4)
        w1.metric("Total", format_minutes(weekly["total_minutes"]))
        w2.metric("Daily Avg", format_minutes(weekly["avg_per_day"]))
        w3.metric("Best Day", weekly["best_day"].strftime("%a"))
        w4.metric("Study Days", f"{weekly['study_days']}/7")
        st.bar_chart({d.date.strftime("%a"): d.minutes for d in payload["last_seven_days"]})
    with monthly_tab:
        monthly = payload["monthly"]
        trend = monthly["trend"]
        w1, w2, w3, w4 = st.columns(4)
        w1.metric("Total", format_minutes(monthly["total_minutes"]))
        w2.metric("Weekly Avg", format_minutes(monthly["avg_per_week"]))
        w3.metric("Best Week", monthly["best_week"])
        w4.metric("Trend", ("+" if trend >= 0 else "-") + format_minutes(abs(trend)))
        st.area_chart({f"Week {i + 1}": w.minutes for i, w in enumerate(payload["weekly_trend"].weeks)})
        st.bar_chart(payload["day_distribution"])


def _pomodoro_tab(st) -> None:
    timer: PomodoroTimer = st.session_state.setdefault("pomodoro", PomodoroTimer())
    labels = {WORK: "Focus", SHORT_BREAK: "Short Break", LONG_BREAK: "Long Break"}
    mode = st.radio("Mode", list(labels), format_func=labels.get, index=list(labels).index(timer.mode), horizontal=True)
    if mode != timer.mode:
        timer.switch_mode(mode)

    @st.fragment(run_every=1 if timer.is_active else None)
    def _countdown() -> None:
        now = time.monotonic()
        last = st.session_state.get("pomodoro_last_tick", now)
        for message in timer.advance(int(now - last)):
            st.toast(message)
        st.session_state["pomodoro_last_tick"] = last + int(now - last)
        st.markdown(f"## `{timer.display()}`")
        st.progress(int(timer.progress()))

    _countdown()
    p1, p2 = st.columns(2)
    if p1.button("Pause" if timer.is_active else "Start"):
        timer.toggle()
        st.rerun()
    if p2.button("Reset"):
        timer.reset()
        st.rerun()
    st.caption(f"Sessions completed: {timer.sessions_completed}")

    with st.expander("Timer Settings"), st.form("pomodoro_settings"):
        current = timer.settings
        work = st.number_input("Work (minutes)", min_value=1, max_value=120, value=current.work_time, step=1)
        short = st.number_input("Short break (minutes)", min_value=1, max_value=60, value=current.short_break, step=1)
        long_ = st.number_input("Long break (minutes)", min_value=1, max_value=120, value=current.long_break, step=1)
        interval = st.number_input(
            "Long break every N sessions", min_value=1, max_value=12, value=current.long_break_interval, step=1
        )
        if st.form_submit_button("Save Settings"):
            try:
                settings = PomodoroSettings(int(work), int(short), int(long_), int(interval))
            except ValueError as exc:
                st.error(str(exc))
            else:
                timer.update_settings(settings)
                st.rerun()


def _cgpa_tab(st) -> None:
    count = st.number_input("Subjects", min_value=1, max_value=20, value=1, step=1)
    raw = []
    for index in range(int(count)):
        c = st.columns(4)
        raw.append(
            (
                c[0].text_input("Subject", key=f"sub_name_{index}", placeholder=f"Subject {index + 1}"),
                c[1].text_input("Total", value="100", key=f"sub_total_{index}"),
                c[2].text_input("Obtained", key=f"sub_obtained_{index}"),
                c[3].text_input("Credits", value="3", key=f"sub_credits_{index}"),
            )
        )
    if st.button("Calculate CGPA", type="primary"):
        try:
            result = calculate_cgpa([parse_subject(*fields) for fields in raw])
        except ValueError as exc:
            st.error(str(exc))
            return
        r1, r2 = st.columns(2)
        r1.metric("Predicted CGPA", f"{result.cgpa:.2f}")
        r2.metric("Percentage", f"{result.percentage:.2f}%")
        st.write(result.grade)


def _budget_tab(st, repos: dict, user_id: str) -> None:
    repo = repos["budget"]
    currency = st.selectbox("Currency", list(budget_rules.CURRENCY_SYMBOLS), key="currency")
    categories = repo.list_categories(user_id)
    budgets = repo.list_budgets(user_id)
    expenses = repo.list_expenses(user_id)
    names_by_id = {c.id: c.name for c in categories}

    money = budget_rules.totals(budgets, expenses)
    t1, t2, t3 = st.columns(3)
    t1.metric("Total Budget", budget_rules.format_amount(money["total_budget"], currency))
    t2.metric("Total Spent", budget_rules.format_amount(money["total_spent"], currency))
    t3.metric("Remaining", budget_rules.format_amount(money["remaining"], currency))

    for category in categories:
        progress = budget_rules.budget_progress(category.id, budgets, expenses)
        st.write(
            f"**{category.name}**: {budget_rules.format_amount(progress['spent'], currency)}"
            f" of {budget_rules.format_amount(progress['total'], currency)}"
        )
        st.progress(min(100, int(progress["percentage"])))

    for item in budgets:
        cols = st.columns([8, 1])
        cols[0].write(
            f"{names_by_id.get(item.category_id, 'Uncategorized')}: "
            f"{budget_rules.format_amount(item.amount, currency)} {item.period} ({item.start_date} to {item.end_date})"
        )
        if cols[1].button("Delete", key=f"delete_budget_{item.id}"):
            repo.delete_budget(user_id, item.id)
            st.rerun()

    for item in expenses:
        cols = st.columns([8, 1])
        cols[0].write(f"{item.date} {item.description}: {budget_rules.format_amount(item.amount, currency)}")
        if cols[1].button("Delete", key=f"delete_expense_{item.id}"):
            repo.delete_expense(user_id, item.id)
            st.rerun()

    with st.form("new_category", clear_on_submit=True):
        name = st.text_input("New category")
        color = st.color_picker("Color", value="#3B82F6")
        if st.form_submit_button("Add Category") and name.strip():
            repo.add_category(BudgetCategory(None, user_id, name.strip(), color))
            st.rerun()

    if categories:
        with st.form("new_budget", clear_on_submit=True):
            names = {c.name: c.id for c in categories}
            picked = st.selectbox("Category", list(names), key="budget_category")
            amount = st.text_input("Budget amount")
            period = st.selectbox("Period", ["weekly", "monthly", "yearly"], index=1)
            start = st.date_input("Start", value=date.today())
            end = st.date_input("End", value=date.today())
            if st.form_submit_button("Add Budget"):
                try:
                    value = budget_rules.validate_amount(amount)
                except ValueError as exc:
                    st.error(str(exc))
                else:
                    repo.add_budget(Budget(None, user_id, names[picked], value, period, start, end))
                    st.rerun()

        with st.form("new_expense", clear_on_submit=True):
            names = {c.name: c.id for c in categories}
            picked = st.selectbox("Category", list(names))
            amount = st.text_input("Amount")
            description = st.text_input("Description")
            spent_on = st.date_input("Date", value=date.today())
            if st.form_submit_button("Add Expense"):
                try:
                    value = budget_rules.validate_amount(amount)
                except ValueError as exc:
                    st.error(str(exc))
                else:
                    repo.add_expense(Expense(None, user_id, names[picked], value, description.strip(), spent_on))
                    st.rerun()


def _message_feed(st, repos: dict) -> MessageFeed:
    """Session-wide feed; local stores push changes into it, Supabase is polled."""

    if "message_feed" not in st.session_state:
        repo = repos["messages"]
        feed = MessageFeed(repo.recent())
        if repos["mode"] == "local":
            repo.subscribe(feed.apply_change)
        st.session_state["message_feed"] = feed
    return st.session_state["message_feed"]


def _community_tab(st, repos: dict, user_id: str, user_name: str) -> None:
    repo = repos["messages"]
    feed = _message_feed(st, repos)
    polling = repos["mode"] == "supabase"

    @st.fragment(run_every=COMMUNITY_POLL_SECONDS if polling else None)
    def _messages() -> None:
        if polling:
            feed.sync(repo.recent())
        for label, messages in feed.grouped().items():
            st.caption(label)
            for message in messages:
                st.write(f"**{initials(message.user_name)}** {message.user_name}: {message.message}")
                if message.user_id == user_id and st.button("Delete", key=f"msg_{message.id}"):
                    repo.delete(user_id, message.id)
                    st.rerun()

    _messages()
    with st.form("send_message", clear_on_submit=True):
        text = st.text_input("Message")
        if st.form_submit_button("Send"):
            try:
                outgoing = compose(user_id, user_name, text)
            except PermissionError as exc:
                st.error(str(exc))
            else:
                if outgoing is not None:
                    repo.send(outgoing)
                    st.rerun()


def _profile_tab(st, repos: dict, user_id: str, email: str) -> None:
    repo = repos["profiles"]
    profile = repo.get(user_id) or Profile(id=user_id)

    st.subheader("Profile Settings")
    st.markdown(f"### {avatar_initials(profile, email)}  {display_name(profile, email)}")
    st.caption(headline(profile))
    if profile.gpa:
        st.caption(f"GPA: {profile.gpa:.2f}")

    years = [""] + list(ACADEMIC_YEARS)
    with st.form("profile"):
        full_name = st.text_input("Full Name", value=profile.full_name or "")
        student_id = st.text_input("Student ID", value=profile.student_id or "")
        major = st.text_input("Major", value=profile.major or "")
        year = st.selectbox("Academic Year", years, index=years.index(profile.year) if profile.year in years else 0)
        gpa = st.text_input("GPA", value="" if profile.gpa is None else f"{profile.gpa:.2f}")
        phone = st.text_input("Phone Number", value=profile.phone or "")
        address = st.text_input("Address", value=profile.address or "")
        bio = st.text_area("Bio", value=profile.bio or "")
        avatar_url = st.text_input("Avatar URL", value=profile.avatar_url or "")
        if st.form_submit_button("Save Profile", type="primary"):
            try:
                updated = edit_profile(
                    profile,
                    full_name=full_name,
                    student_id=student_id,
                    major=major,
                    year=year,
                    gpa=parse_gpa(gpa),
                    phone=phone,
                    address=address,
                    bio=bio,
                    avatar_url=avatar_url,
                )
            except ValueError as exc:
                st.error(str(exc))
                return
            repo.save(updated)
            st.success("Profile updated successfully")
            st.rerun()


def main() -> None:
    import streamlit as st

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    st.set_page_config(page_title="Campus Life", layout="wide")

    theme = ThemeContext(SessionStateStore(st.session_state))
    with st.sidebar:
        st.header("Campus Life")
        dark = st.toggle("Dark mode", value=theme.theme == "dark")
        if dark != (theme.theme == "dark"):
            theme.toggle_theme()
        color = st.selectbox("Color theme", COLOR_THEMES, index=COLOR_THEMES.index(theme.color_theme))
        if color != theme.color_theme:
            theme.set_color_theme(color)
    st.markdown(f"<style>{theme.stylesheet()}</style>", unsafe_allow_html=True)

    repos = _repositories(st)
    user_id, email = _user(st, repos)
    if not user_id:
        st.info("Sign in from the sidebar to load your dashboard.")
        return

    tabs = st.tabs(
        ["Overview", "Tasks", "Courses", "Study Tracker", "Pomodoro", "CGPA", "Budget", "Community", "Profile"]
    )
    try:
        user_name = display_name(repos["profiles"].get(user_id), email)
        with tabs[0]:
            _overview_tab(st, repos, user_id, user_name)
        with tabs[1]:
            _tasks_tab(st, repos, user_id)
        with tabs[2]:
            _courses_tab(st, repos, user_id)
        with tabs[3]:
            _tracker_tab(st, repos, user_id, theme.theme == "dark")
        with tabs[4]:
            _pomodoro_tab(st)
        with tabs[5]:
            _cgpa_tab(st)
        with tabs[6]:
            _budget_tab(st, repos, user_id)
        with tabs[7]:
            _community_tab(st, repos, user_id, user_name)
        with tabs[8]:
            _profile_tab(st, repos, user_id, email)
    except BackendError as exc:
        st.error(f"Backend error: {exc}")
    except ValueError as exc:
        st.error(f"Input error: {exc}")


if __name__ == "__main__":
    main()
