"""Build CSS selectors by chaining — every call returns a new selector."""

from katas import combine, element

row = element("tr").pseudo_class("nth-of-type(even)")
cell = element("td").class_("numeric")
print(combine(element("table").id("data"), ">", combine(row, " ", cell)).render())
