"""
pdfschedule: timetable PDF -> structured schedule events.
"""
