import os

import streamlit as st

from puppy_mentor.breeds import breed_label, known_breeds
from puppy_mentor.dates import calculate_age
from puppy_mentor.profile import PuppyProfile
from puppy_mentor.training import training_progress
from puppy_mentor.units import format_age, format_percentage, format_weight, kg_to_lbs
from puppy_mentor.vaccination import VACCINATION_SCHEDULE
from puppy_mentor.weight import body_condition_score, growth_rate

st.set_page_config(page_title="Puppy Mentor", page_icon="🐶", layout="wide")
st.title("🐶 Puppy Mentor")

breeds = known_breeds()
default_breed = os.environ.get("PUPPY_MENTOR_DEFAULT_BREED", "golden_retriever")
default_index = breeds.index(default_breed) if default_breed in breeds else 0

st.sidebar.markdown("### Puppy")
name = st.sidebar.text_input("Name", value="Buddy")
breed = st.sidebar.selectbox("Breed", breeds, index=default_index, format_func=breed_label)
birth_date = st.sidebar.date_input("Birth date")
weight = st.sidebar.number_input("Weight (kg)", min_value=0.1, value=5.0, step=0.1)
activity = st.sidebar.selectbox("Activity", ["low", "medium", "high"], index=1)
show_lbs = st.sidebar.toggle("Show pounds", value=False)

try:
    puppy = PuppyProfile(
        name=name,
        breed=breed,
        birth_date=birth_date,
        weight_kg=float(weight),
        activity=activity,
    )
except ValueError as exc:
    st.error(f"Invalid profile: {exc}")
    st.stop()

summary = puppy.summary()
age = calculate_age(puppy.birth_date)
st.sidebar.caption(f"Age: {format_age(age.years, age.months, age.days)} ({summary.age_in_weeks} weeks)")


def show_weight(kg: float) -> str:
    return format_weight(kg_to_lbs(kg), "lbs") if show_lbs else format_weight(kg)


page = st.sidebar.radio("Page", ["Dashboard", "Growth", "Body condition", "Training"])

if page == "Dashboard":
    st.header(f"{puppy.name} the {breed_label(puppy.breed)}")
    cols = st.columns(3)
    cols[0].metric("Current weight", show_weight(puppy.weight_kg))
    cols[1].metric(
        "Ideal range",
        f"{show_weight(summary.weight_range.min)} - {show_weight(summary.weight_range.max)}",
    )
    cols[2].metric("Per meal", f"{summary.feeding.amount} {summary.feeding.unit} x {summary.feeding.frequency}/day")

    st.subheader("Vaccinations")
    due = set(summary.vaccinations.due)
    rows = [
        {"vaccine": v.name, "age_weeks": v.weeks, "status": "due" if v.name in due else "upcoming"}
        for v in VACCINATION_SCHEDULE
    ]
    st.dataframe(rows, use_container_width=True)
    if summary.vaccinations.next is None:
        st.success("All scheduled vaccines are due or done")
    else:
        st.info(f"Next: {summary.vaccinations.next} on {summary.vaccinations.next_due_date:%Y-%m-%d}")

if page == "Growth":
    st.header("Growth rate")
    previous = st.number_input("Previous weight (kg)", min_value=0.0, value=max(0.0, float(weight) - 0.5), step=0.1)
    days = st.number_input("Days between weighings", value=7, step=1)
    result = growth_rate(puppy.weight_kg, float(previous), float(days))
    st.metric("Growth", f"{result.rate} {result.unit}")

if page == "Body condition":
    st.header("Body condition score")
    ideal = (summary.weight_range.min + summary.weight_range.max) / 2
    ribs = st.selectbox("Ribs", ["visible", "slightly_visible", "not_visible"], index=1)
    waist = st.selectbox("Waist", ["pronounced", "visible", "not_visible"], index=1)
    result = body_condition_score(puppy.weight_kg, ideal, ribs, waist)
    st.metric("BCS", f"{result.score}/9", help=f"Compared with ideal weight {show_weight(ideal)}")
    st.write(result.description)

if page == "Training":
    st.header("Training progress")
    total = st.number_input("Assigned exercises", min_value=0, value=10, step=1)
    completed = st.number_input("Completed exercises", min_value=0, value=5, step=1)
    mastery = st.selectbox("Mastery", ["beginner", "intermediate", "advanced"])
    result = training_progress(int(completed), int(total), mastery)
    st.progress(min(result.percentage, 100) / 100)
    st.write(f"{format_percentage(result.percentage, 0)} · {result.level}")
