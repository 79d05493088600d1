"""
Admission odds service: estimates a student's probability of admission to
each university program from binned historical entering-average data.
"""
