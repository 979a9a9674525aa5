from __future__ import annotations

SAMPLE_BEFORE = (
    "Our company has been providing innovative solutions that are designed to "
    "help businesses achieve their goals for over 15 years. We are committed to "
    "delivering exceptional quality and our team of experienced professionals is "
    "dedicated to ensuring that every project is completed successfully and "
    "efficiently. Services are offered by us in a wide range of areas including "
    "web development, digital marketing, and brand strategy. It should be noted "
    "that our approach is fundamentally different from other agencies because we "
    "truly listen to our clients. Contact us today to learn more about how we can "
    "help your business grow and succeed in today's competitive marketplace."
)

SAMPLE_AFTER = (
    "We help businesses grow with web development, digital marketing, and brand "
    "strategy. For 15 years, our team has delivered results — not just "
    "promises. What makes us different? We listen first, then build. No "
    "cookie-cutter solutions. Every project starts with your goals and ends with "
    "measurable results. Ready to grow? Let's talk."
)
