"""Lab Attendance Analytics package.

Feature modules (attendance, occupancy, analytics, checkout) each keep their
model / repository / service / controller split; `container` wires them and
the Flask controllers stay thin.
"""
