"""
The MODEL layer contains pure data structures and the calculation core.
It has NO knowledge of the GUI (Qt).
It deals with input domains, the BMI/BRI formulas, categories and gauges.
"""
