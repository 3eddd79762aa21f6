# palette_kit/data/_palette_table.py
# RGB555 -> palette index, 32768 bytes, base64.
PALETTE_TABLE_B64 = (
    "AQEBmpqampqamZmZmZmZl5eXl5ebm5ubm5ubnJycnJwBAQGampqampqZmZmZmZmXl5eXl5ub"
    "m5ubm5ucnJycnAICAgKampqampmZmZmZmZeXl5eXm5ubm5ubm5ycnJycAgICAgKampqamZmZ"
    "mZmZl5eXl5ebm5ubm5ucnJycnJwFBQUFBAQEkJCQkJCZmZeXl5eXl5ubm5ubm5ycnJycnAUF"
    "BQUFBASQkJCQkJCJl5eXl5OTk5ubm5ubnJycnJycBQUFBQUFBQaJiYmJiYmJiZOTk5OTk5Ob"
    "m5ycnJyclJRSUlJSBQVxcXGJiYmJiYmNjY2Tk5OTk5GRkZSUlJSUlFJSUlJSUnFxcXFxgYGB"
    "gY2NjY2NjZGRkZGRkZSUlJSUUlJSUlJSUnFxcXGBgYGBgY2NjY2NkZGRkZGRlJSUlJRVVVVV"
    "VVVVb29vb2+BgYGBgYiIiIiIkZGRkZGOjo6OjlVVVVVVVVVVb29vb299fX19iIiIiIiIioqK"
    "jo6Ojo6OVVVVVVVVVVVqampqan19fX19fYiIioqKioqKjo6Ojo5WVlZWVlZWVmpqampqan19"
    "fX19h4eHioqKioqLi4uLi1ZWVlZWVlZWaGhoaGhoaHp6enp6h4eGhoaGhouLi4uLVlZWVlZW"
    "VlZWaGhoaGhubnp6enp6eoaGhoaGhouLi4tdXV1dXV1dXV1mZmZmbm5ubnp6enp6f39/f39/"
    "hYWFhV1dXV1dXV1dXWZmZmZmZm52dnZ2dn9/f39/f4WFhYWFXV1dXV1dXV1dZmZmZmZmZnZ2"
    "dnZ2dn9/f39/hYWFhYVXV1dXV1dXV1dXV2dnZ2dndnZ2dnZ2dnx8fHx8hYWFhVlZWVlZWVlX"
    "V1dXZ2dnZ2dnZ3V1dXV1fHx8fHx8gICAWVlZWVlZWVlZWVlnZ2dnZ2dnc3Nzc3NzfHx8fICA"
    "gIBZWVlZWVlZWVlTU1NlZWVlZWVzc3Nzc3NzeHh4gICAgFhYWFhYWFhTU1NTU2VlZWVlZWVz"
    "c3Nzc3h4eHh4eHiAWFhYWFhYWFhYWFhYZWVlZWVla2tra2treHh4eHh5eXlYWFhYWFhYWFhY"
    "WFhiYmJiYmtra2tra2treXl5eXl5eVxcXFxcXFxcXFxcYmJiYmJiYmJra2ttbW1tbXl5eXl5"
    "XFxcXFxcXFxcXFxcYmJiYmJiYmJtbW1tbW1tbXd3d3dcXFxcXFxcXFxcXFxcY2NjY2NjY2Nt"
    "bW1tbXR0dHR0dFpaWlpaWlpaWlpaWlpjY2NjY2NjY2NpaXR0dHR0dHR0WlpaWlpaWlpaWlpa"
    "WmBgYGBgY2NpaWlpaWlpdHRycnJaWlpaWlpaWlpaWlpaYGBgYGBgYGlpaWlpaWlycnJycgEB"
    "AZqampqampmZmZmZmZeXl5eXm5ubm5ubm5ycnJycAQECmpqampqamZmZmZmZl5eXl5ebm5ub"
    "m5ubnJycnJwCAgICmpqampqZmZmZmZmXl5eXl5ubm5ubm5ucnJycnAICAgICmpqampmZmZmZ"
    "mZeXl5eXm5ubm5ubnJycnJycBQUFBQQEBJCQkJCQmZmXl5eXl5ebm5ubm5ucnJycnJwFBQUF"
    "BQQEkJCQkJCQiZeXl5eTk5Obm5ubm5ycnJycnAUFBQUFBQUGiYmJiYmJiYmTk5OTk5OTm5uc"
    "nJycnJSUUlJSUgUFcXFxiYmJiYmJjY2Nk5OTk5ORkZGUlJSUlJRSUlJSUlJxcXFxcYGBgYGN"
    "jY2NjY2RkZGRkZGUlJSUlFJSUlJSUlJxcXFxgYGBgYGNjY2NjZGRkZGRkZSUlJSUVVVVVVVV"
    "VW9vb29vgYGBgYGIiIiIiJGRkZGRjo6Ojo5VVVVVVVVVVW9vb29vfX19fYiIiIiIiIqKio6O"
    "jo6OjlVVVVVVVVVVampqamp9fX19fX2IiIqKioqKio6Ojo6OVlZWVlZWVlZqampqamp9fX19"
    "fYeHh4qKioqKi4uLi4tWVlZWVlZWVmhoaGhoaGh6enp6eoeHhoaGhoaLi4uLi1ZWVlZWVlZW"
    "VmhoaGhobm56enp6enqGhoaGhoaLi4uLXV1dXV1dXV1dZmZmZm5ubm56enp6en9/f39/f4WF"
    "hYVdXV1dXV1dXV1mZmZmZmZudnZ2dnZ/f39/f3+FhYWFhV1dXV1dXV1dXWZmZmZmZnZ2dnZ2"
    "dnZ/f39/f4WFhYWFV1dXV1dXV1dXV1dnZ2dnZ3Z2dnZ2dnZ8fHx8fIWFhYVZWVlZWVlZV1dX"
    "V2dnZ2dnZ2d1dXV1dXx8fHx8fICAgFlZWVlZWVlZWVlZZ2dnZ2dnZ3Nzc3Nzc3x8fHyAgICA"
    "WVlZWVlZWVlTU1NTZWVlZWVlc3Nzc3Nzc3h4eICAgIBYWFhYWFhYU1NTU1NlZWVlZWVlc3Nz"
    "c3N4eHh4eHh4gFhYWFhYWFhYWFhYWGVlZWVlZWtra2tra3h4eHh4eXl5WFhYWFhYWFhYWFhY"
    "YmJiYmJra2tra2tra3l5eXl5eXlcXFxcXFxcXFxcXGJiYmJiYmJia2trbW1tbW15eXl5eVxc"
    "XFxcXFxcXFxcXGJiYmJiYmJibW1tbW1tbW13d3d3XFxcXFxcXFxcXFxcXGNjY2NjY2NjbW1t"
    "bW10dHR0dHRaWlpaWlpaWlpaWlpaY2NjY2NjY2NjaWl0dHR0dHR0dFpaWlpaWlpaWlpaWlpg"
    "YGBgYGNjaWlpaWlpaXR0cnJyWlpaWlpaWlpaWlpaWmBgYGBgYGBpaWlpaWlpcnJycnIDAwOa"
    "mpqampqZmZmZmZmXl5eXl5ubm5ubm5ucnJycnAICAgKampqampmZmZmZmZeXl5eXm5ubm5ub"
    "m5ycnJycAgICApqampqamZmZmZmZl5eXl5ebm5ubm5ubnJycnJwCAgICApqampqQmZmZmZmX"
    "l5eXl5ubm5ubm5ycnJycnAUFBQQEBASQkJCQkJmZl5eXl5eXm5ubm5ubnJycnJycBQUFBQUE"
    "BJCQkJCQkImXl5eXk5OTk5ubm5ucnJycnJwFBQUFBQUGBomJiYmJiYmJk5OTk5OTk5ubnJyc"
    "nJyUlFJSUlJScXFxcYmJiYmJiY2NjZOTk5OTkZGRlJSUlJSUUlJSUlJScXFxcXGBgYGBjY2N"
    "jY2NkZGRkZGRlJSUlJRSUlJSUlJScXFxcYGBgYGBjY2NjY2RkZGRkZGUlJSUlFVVVVVVVVVv"
    "b29vb4GBgYGBiIiIiIiRkZGRkY6Ojo6OVVVVVVVVVVVvb29vb319fX2IiIiIiIiKioqOjo6O"
    "jo5VVVVVVVVVVWpqampqfX19fX19iIiKioqKioqOjo6OjlZWVlZWVlZqampqampqfX19fX2H"
    "h4eKioqKiouLi4uLVlZWVlZWVlZoaGhoaGhoenp6enqHh4aGhoaGi4uLi4tWVlZWVlZWVlZo"
    "aGhoaG5uenp6enp6hoaGhoaGi4uLi11dXV1dXV1dXWZmZmZubm5uenp6enp/f39/f4WFhYWF"
    "XV1dXV1dXV1dZmZmZmZmbnZ2dnZ2f39/f39/hYWFhYVdXV1dXV1dXV1mZmZmZmZ2dnZ2dnZ2"
    "f39/f3+FhYWFhVdXV1dXV1dXV1dXZ2dnZ2d2dnZ2dnZ2fHx8fHx8hYWFWVlZWVlZWVdXV1dn"
    "Z2dnZ2dndXV1dXV8fHx8fHyAgIBZWVlZWVlZWVlZWWdnZ2dnZ2dzc3Nzc3N8fHx8gICAgFlZ"
    "WVlZWVlZU1NTU2VlZWVlZXNzc3Nzc3N4eHiAgICAWFhYWFhYWFNTU1NTZWVlZWVlZXNzc3Nz"
    "eHh4eHh4eIBYWFhYWFhYWFhYWFhlZWVlZWVra2tra2t4eHh4eHl5eVhYWFhYWFhYWFhYWGJi"
    "YmJia2tra2tra2t5eXl5eXl5XFxcXFxcXFxcXFxiYmJiYmJiYmtra21tbW1teXl5eXlcXFxc"
    "XFxcXFxcXFxiYmJiYmJiYm1tbW1tbW1td3d3d1xcXFxcXFxcXFxcXFxjY2NjY2NjY21tbW1t"
    "dHR0dHR0WlpaWlpaWlpaWlpaWmNjY2NjY2NjY2lpdHR0dHR0dHRaWlpaWlpaWlpaWlpaYGBg"
    "YGBjY2lpaWlpaWl0cnJyclpaWlpaWlpaWlpaWlpgYGBgYGBgaWlpaWlpaXJycnJyAwMDA8Ka"
    "mpqamZmZmZmZl5eXl5ebm5ubm5ubnJycnJwDAwMDwpqampqZmZmZmZmXl5eXl5ubm5ubm5uc"
    "nJycnAICAgICmpqampmZmZmZmZeXl5eXm5ubm5ubnJycnJycAgICAgIEmpqQkJmZmZmZl5eX"
    "l5ebm5ubm5ucnJycnJwFBQUEBAQEkJCQkJCQmZeXl5eXl5ubm5ubm5ycnJycnAUFBQUFBAQE"
    "kJCQkJCJp5eXk5OTk5Obm5ucnJycnJycBQUFBQUFBgaJiYmJiYmJiZOTk5OTk5OTm5ycnJyU"
    "lJRSUlJSUnFxcXGJiYmJiYmNjY2Tk5OTk5GRkZSUlJSUlFJSUlJSUnFxcXFxgYGBgY2NjY2N"
    "jZGRkZGRkZSUlJSUUlJSUlJScXFxcXGBgYGBgY2NjY2NkZGRkZGRlJSUlJRVVVVVVVVVb29v"
    "b2+BgYGBgYiIiIiIkZGRkZGOjo6OjlVVVVVVVVVVb29vb299fX19iIiIiIiIioqKjo6Ojo6O"
    "VVVVVVVVVVVqampqan19fX19fYiIioqKioqKjo6Ojo5WVlZWVlZWampqampqan19fX19h4eH"
    "ioqKioqLi4uLi1ZWVlZWVlZWaGhoaGhobnp6enp6h4eGhoaGhouLi4uLVlZWVlZWVlZoaGho"
    "aGhubnp6enp6eoaGhoaGhouLi4tdXV1dXV1dXV1mZmZmbm5ubnp6enp/f39/f3+FhYWFhV1d"
    "XV1dXV1dXWZmZmZmZm52dnZ2dn9/f39/f4WFhYWFXV1dXV1dXV1dZmZmZmZmdnZ2dnZ2dn9/"
    "f39/hYWFhYVXV1dXV1dXV1dXV2dnZ2dndnZ2dnZ2dnx8fHx8fIWFhVlZWVlZWVlXV1dXZ2dn"
    "Z2dnZ3V1dXV1fHx8fHx8gICAWVlZWVlZWVlZWVlnZ2dnZ2dnc3Nzc3NzfHx8fICAgIBZWVlZ"
    "WVlZWVNTU1NlZWVlZWVzc3Nzc3NzeHh4gICAgFhYWFhYWFhTU1NTU2VlZWVlZWVzc3Nzc3h4"
    "eHh4eHiAWFhYWFhYWFhYWFhYZWVlZWVla2tra2treHh4eHh5eXlYWFhYWFhYWFhYWFhiYmJi"
    "Ymtra2tra2treXl5eXl5eVxcXFxcXFxcXFxcYmJiYmJiYmJra2ttbW1tbXl5eXl5XFxcXFxc"
    "XFxcXFxcYmJiYmJiYmJtbW1tbW1tbXd3d3dcXFxcXFxcXFxcXFxcY2NjY2NjY2NtbW1tbXR0"
    "dHR0dFpaWlpaWlpaWlpaWlpjY2NjY2NjY2NpaXR0dHR0dHR0WlpaWlpaWlpaWlpaWmBgYGBg"
    "Y2NpaWlpaWlpdHJycnJaWlpaWlpaWlpaWlpaYGBgYGBgYGlpaWlpaWlycnJycgMDAwPCwsLC"
    "s7Ozs5mZmZeXl5eXm5ubm5ubnJycnJycAwMDA8LCwsKzs7OzmZmZl5eXl5ebm5ubm5ucnJyc"
    "nJwDAwMDwsLCwrOzs7OZmaeXl5eXl5ubm5ubm5ycnJycnAQEBAQEwsLCkLOzs5mZp6eXl5eX"
    "m5ubm5ubnJycnJycBQUEBAQEBJCQkJCQkKenp5eXl5OTm5ubm5ucnJycnJwFBQUFBAQEBJCQ"
    "kJCQiaenp5OTk5OTm5ubnJycnJyclAUFBQUFBgYGBomJiYmJiY2Tk5OTk5OTk6KinJyUlJSU"
    "UlJSUlJxcXFxiYmJiYmJjY2NjZOTk5ORkZGUlJSUlJRSUlJSUlJxcXFxcYGBgYGNjY2NjY2R"
    "kZGRkZGUlJSUlFJSUlJSUnFxcXFxgYGBgYGNjY2NjZGRkZGRkZSUlJSUVVVVVVVVVW9vb29v"
    "gYGBgYiIiIiIiJGRkZGOjo6Ojo5VVVVVVVVVb29vb29vfX19fYiIiIiIioqKio6Ojo6OjlVV"
    "VVVVVVVqampqamp9fX19fX2IiIqKioqKio6Ojo6OVlZWVlZWVmpqampqamp9fX19h4eHh4qK"
    "ioqKi4uLi4tWVlZWVlZWVmhoaGhoaG56enp6eoeHhoaGhoaLi4uLi1ZWVlZWVlZWaGhoaGhu"
    "bm56enp6enqGhoaGhoaLi4uLXV1dXV1dXV1dZmZmZm5ubm56enp6f39/f39/hYWFhYVdXV1d"
    "XV1dXV1mZmZmZmZudnZ2dnZ/f39/f3+FhYWFhV1dXV1dXV1XV2ZmZmZmZnZ2dnZ2dnZ/f39/"
    "f4WFhYWFV1dXV1dXV1dXV1dnZ2dnZ3Z2dnZ2dnV8fHx8fHyFhYVZWVlZWVlZV1dXZ2dnZ2dn"
    "Z2d1dXV1dXx8fHx8fICAgFlZWVlZWVlZWVlZZ2dnZ2dnZ3Nzc3Nzc3x8fHyAgICAWVlZWVlZ"
    "WVNTU1NTZWVlZWVlc3Nzc3Nzc3h4eICAgIBYWFhYWFhYU1NTU1NlZWVlZWVlc3Nzc3N4eHh4"
    "eHh4gFhYWFhYWFhYWFhYWGVlZWVlZWtra2tra3h4eHh5eXl5WFhYWFhYWFhYWFhYYmJiYmJr"
    "a2tra2tra3l5eXl5eXlcXFxcXFxcXFxcXGJiYmJiYmJia2trbW1tbW15eXl5eVxcXFxcXFxc"
    "XFxcXGJiYmJiYmJibW1tbW1tbW13d3d3XFxcXFxcXFxcXFxcXGNjY2NjY2NjbW1tbW10dHR0"
    "dHRaWlpaWlpaWlpaWlpaY2NjY2NjY2NjaWl0dHR0dHR0dFpaWlpaWlpaWlpaWlpgYGBgYGNj"
    "aWlpaWlpaXRycnJyWlpaWlpaWlpaWlpaYGBgYGBgYGBpaWlpaWlpcnJycnIDAwMDwsLCwrOz"
    "s7Ozs6enp5eXl5ubm5ubm5ycnJycnAMDAwPCwsLCs7Ozs7Ozp6enp5eXm5ubm5ubnJycnJyc"
    "AwMDA8LCwsLCs7Ozs6enp6enl5ebm5ubm5ucnJycnJwEBAQEBMLCwsKzs7Ozp6enp6eXl5ub"
    "m5ubopycnJycnC0tBAQEBASQkJCQkLOnp6enp5OTk5Obm6KinJycnJycBQUFBQQEBAaQkJCQ"
    "kKenp6eTk5OTk5OioqKcnJyclJQFBQUFBgYGBgaJiYmJiYmNk5OTk5OTk6KioqKUlJSUlFJS"
    "UlJSBgYGBgaJiYmJiY2NjY2Tk5ORkZGRlJSUlJSUUlJSUlJScXFxcXGBgYGBjY2NjY2NkZGR"
    "kZGRlJSUlJRSUlJSUlJxcXFxcYGBgYGBjY2NjYiRkZGRkZGUlJSUjlVVVVVVVW9vb29vb4GB"
    "gYGIiIiIiIiRkZGRjo6Ojo6OVVVVVVVVVW9vb29vb319fX2IiIiIiIqKioqOjo6Ojo5VVVVV"
    "VVVVampqampqfX19fX19iIiKioqKioqOjo6OjlZWVlZWVlZqampqampqfX19fYeHh4eKioqK"
    "iouLi4uLVlZWVlZWVlZoaGhoaGhuenp6enqHh4aGhoaGi4uLi4tWVlZWVlZWVmhoaGhobm5u"
    "enp6enp6hoaGhoaGi4uLi11dXV1dXV1dZmZmZmZubm5ubnp6en9/f39/f4WFhYWFXV1dXV1d"
    "XV1dZmZmZmZmdnZ2dnZ2f39/f39/hYWFhYVXV1dXV1dXV1dmZmZmZmZ2dnZ2dnZ2f39/f3+F"
    "hYWFhVdXV1dXV1dXV1dXZ2dnZ2d2dnZ2dnV1fHx8fHx8hYWFWVlZWVlZWVdXV2dnZ2dnZ2d1"
    "dXV1dXV8fHx8fHyAgIBZWVlZWVlZWVlZWWdnZ2dnZ2dzc3Nzc3N8fHyAgICAgFlZWVlZWVNT"
    "U1NTU2VlZWVlZXNzc3Nzc3h4eHiAgICAWFhYWFhYWFNTU1NTZWVlZWVlZXNzc3NzeHh4eHh4"
    "eIBYWFhYWFhYWFhYWFhlZWVlZWVra2tra2t4eHh4eXl5eVhYWFhYWFhYWFhYYmJiYmJia2tr"
    "a2tra2t5eXl5eXl5XFxcXFxcXFxcXGJiYmJiYmJiYmtra21tbW1teXl5eXlcXFxcXFxcXFxc"
    "XFxiYmJiYmJiYm1tbW1tbW1td3d3d1xcXFxcXFxcXFxcXFxjY2NjY2NjY21tbW10dHR0dHR0"
    "WlpaWlpaWlpaWlpaWmNjY2NjY2NjY2lpdHR0dHR0dHRaWlpaWlpaWlpaWlpaYGBgYGBgY2lp"
    "aWlpaWlycnJyclpaWlpaWlpaWlpaWmBgYGBgYGBgaWlpaWlpaXJycnJy+vr6+sLCwsLCs7Oz"
    "s7Onp6enp6ysrJuboqKinJycnJz6+vr6wsLCwsKzs7Ozs6enp6enrKysm6KioqKcnJycnPr6"
    "+vrCwsLCwrOzs7Ozp6enp6esrKyboqKiopycnJyc+vr6+vrCwsLCs7Ozs6enp6enp6ysrKKi"
    "oqKinJycnJwtLS0EBAQEwpCQs7Ozp6enp6enrKysoqKioqKcnJycnC0tLS0tBgYGra2tra2n"
    "p6enp5OTk5OioqKiopyclJSULS0tLQYGBgYGra2tra2tjY2Tk5OTk5OioqKilJSUlJRSUlJS"
    "BgYGBgYGra2trY2NjY2Nk5OTkZGRkZSUlJSUlFJSUlJSUnFxcQcHgYGBgY2NjY2NnZGRkZGR"
    "kZSUlJSUUlJSUkBAQHEHBweBgYGBgY2NjZ2dkZGRkZGRlJSOjo5VVVVVVUBAb29vb2+BgYGB"
    "iIiIiIiIkZGRkY6Ojo6OjlVVVVVVVVVvb29vb299fX19iIiIiIiKioqKjo6Ojo6OVVVVVVVV"
    "VWpqampqan19fX19h4eHioqKioqKjo6OjotWVlZWVlZWampqampqan19fX2Hh4eHh4qKiouL"
    "i4uLi1ZWVlZWVlZWaGhoaGhobnp6enp6h4eGhoaGhouLi4uLVlZWVlZWVlZoaGhoaG5ubnp6"
    "enp6eoaGhoaGhouLi4tdXV1dXV1dXWZmZmZmbm5ubm56enp/f39/f3+FhYWFhV1dXV1dXV1d"
    "ZmZmZmZmZnZ2dnZ2dn9/f39/f4WFhYWFV1dXV1dXV1dXZmZmZmZmdnZ2dnZ2dn9/f39/hYWF"
    "hYVXV1dXV1dXV1dXV2dnZ2dndnZ2dXV1dXx8fHx8fIWFhVlZWVlZWVlZV1dnZ2dnZ2dndXV1"
    "dXV1fHx8fHyAgICAWVlZWVlZWVlZWVNnZ2dnZ2dnc3Nzc3NzfHx8gICAgIBZWVlZWVNTU1NT"
    "U1NlZWVlZWVzc3Nzc3N4eHh4gICAgFhYWFhYWFhTU1NTU2VlZWVlZWVzc3Nzc3h4eHh4eHiC"
    "WFhYWFhYWFhYWFhYZWVlZWVla2tra2treHh4eHl5eXlYWFhYWFhYWFhYWGJiYmJiYmtra2tr"
    "a2treXl5eXl5eVxcXFxcXFxcXFxiYmJiYmJiYmJra21tbW1tbXl5eXl5XFxcXFxcXFxcXFxc"
    "YmJiYmJiYm1tbW1tbW1td3d3d3dcXFxcXFxcXFxcXFxcY2NjY2NjY2NjbW1tdHR0dHR0dFpa"
    "WlpaWlpaWlpaWlpjY2NjY2NjY2NpaWl0dHR0dHR0WlpaWlpaWlpaWlpaWmBgYGBgYGNpaWlp"
    "aWlpcnJycnJaWlpaWlpaWlpaWlpgYGBgYGBgYGlpaWlpaWlycnJycvr6+vr6wsLC17Ozs7Oz"
    "p6enp6ysrKysoqKioqKcnJyc+vr6+vrCwtfXs7Ozs7Onp6enrKysrKyioqKiopycnJz6+vr6"
    "+sLX19ezs7Ozs6enp6esrKysrKKioqKinJycnPr6+vr6+tfX19ezs7Onp6enp6ysrKysoqKi"
    "oqKcnJycLS0tLS0E19fXra2ts6enp6enrKysrKKioqKiopyclJQtLS0tLQYGBq2tra2traen"
    "p6esrKysoqKioqKilJSUlC0tLS0tBgYGBq2tra2trbGxsZOTk6WloqKiopSUlJSUUlJSUgYG"
    "BgYGBq2tra2tjY2NjY2lpaWlkZGUlJSUlJRSUlJSQEAHBwcHBweBnp6NjY2dnZ2dkZGRkZGU"
    "lJSUlEBAQEBAQEAHBwcHB4Genp6enZ2dnZ2RkZGRkZ+fn5+OVVVVQEBAQG9vb29vgZ6enp6I"
    "iIiIiIiVlZWVjo6Ojo5VVVVVVVVVb29vb28IfX19fYiIiIiIioqVlZWOjo6OjlVVVVVVVWpq"
    "ampqamp9fX19fYeHh4eKioqKio6Li4uLVlZWVlZWR0dqampqagl9fX2Hh4eHh4eKioaLi4uL"
    "i4tWVlZWVlZWVmhoaGhobm56enp6h4eHhoaGhoaLi4uLi1ZWVlZWVlZWaGhoaG5ubm56enp6"
    "enqGhoaGhoaLi4uLXV1dXV1dXUtmZmZmZm5ubm5uen5+f39/f39/hYWFhYVdXV1dXV1dXWZm"
    "ZmZmZmZ2dnZ2dn5/f39/f3+FhYWFhVdXV1dXV1dXV2ZmZmZmZnZ2dnZ2dnZ/f39/f4WFhYWF"
    "V1dXV1dXV1dXV1dnZ2dnZ3Z2dXV1dXV8fHx8fHyFjIxZWVlZWVlZWVdXZ2dnZ2dnZ3V1dXV1"
    "dXx8fHx8gICAgFlZWVlZWVlZWVNTZ2dnZ2dnc3Nzc3Nzc3x8fICAgICAWVlZU1NTU1NTU1NT"
    "ZWVlZWVlc3Nzc3NzeHh4eICAgIBYWFhYWFhYU1NTU1NlZWVlZWVlc3Nzc3h4eHh4eHh4glhY"
    "WFhYWFhYWFhYWGVlZWVla2tra2tra3h4eHl5eXl5WFhYWFhYWFhYWFhiYmJiYmJra2tra2tr"
    "a3l5eXl5eXlcXFxcXFxcXFxcYmJiYmJiYmJia2ttbW1tbW15eXl5eVxcXFxcXFxcXFxcXGJi"
    "YmJiYmJtbW1tbW1tbXd3d3d3XFxcXFxcXFxcXFxcY2NjY2NjY2NjY21tbXR0dHR0dHRaWlpa"
    "WlpaWlpaWlpaY2NjY2NjY2NpaWlpdHR0dHR0dFpaWlpaWlpaWlpaWmBgYGBgYGBpaWlpaWlp"
    "aXJycnJyWlpaWlpaWlpaWlpaYGBgYGBgYGBpaWlpaWlpcnJycnL6+vr6+tfX19fXurq6urq6"
    "p6ysrKysrKKioqKiqqqqqvr6+vr619fX19e6urq6urqnrKysrKysoqKioqKqqqqq+vr6+vrX"
    "19fX19e6urq6uqesrKysrKyioqKioqqqqqr6+vr6+vrX19fX17q6urqnp6ysrKysrKKioqKi"
    "qqqqqi0tLS0t+tfX19etrbq6uqenrKysrKysoqKioqKqqqqqLS0tLS0GBuitra2tra2xsbGx"
    "rKysrKWioqKiqqqqqqotLS0tLQYGBgatra2trbGxsbGxpaWlpaWloqKqqqqUlCcnJycnBgYG"
    "Bwetra2tsbGxsZ2dpaWlpaWln5+fn5+fQEBAQEBABwcHBwcHnp6enp2dnZ2dnaWlkZGfn5+f"
    "n59AQEBAQEBABwcHBweenp6enp2dnZ2dnZGRlZ+fn5+fn0BAQEBAQEBAbwgICAienp6eiIid"
    "nZ2VlZWVlZWOjo6OVVVVVVVAQEBqCAgICAh9fX2IiIiIiJWVlZWVlY6Ojo5HR0dHR0dHampq"
    "amoJCX19fYeHh4eHioqKlZWLi4uLi1ZWVkdHR0dHampqagkJCX19h4eHh4eHhoaGi4uLi4uL"
    "VlZWVlZWR0doaGhoaG5ubnp6eoeHh4aGhoaGi4uLi4tWVlZWVlZWS2hoaGhubm5ubnp6enqG"
    "hoaGhoaGi4uLi11dXV1dS0tLS2ZmZm5ubm5ufn5+fn5/f39/f4WFhYWFXV1dXV1dXUtmZmZm"
    "ZmZmdnZ2dn5+fn9/f39/hYWFhYVXV1dXV1dXV1dmZmZmZlt2dnZ2dnZ2f39/f4WFhYWFhVdX"
    "V1dXV1dXV1dnZ2dnZ2d1dXV1dXV1fHx8fHx8jIyMWVlZWVlZWVlXZ2dnZ2dnZ2d1dXV1dXV8"
    "fHx8fICAgIBZWVlZWVlZWVNTU2dnZ2dnZ3Nzc3Nzc3N8fHyAgICAgFNTU1NTU1NTU1NTU2Vl"
    "ZWVlZXNzc3Nzc3h4eHh4gICAWFhYWFhYWFNTU1NTZWVlZWVlZXNzc3N4eHh4eHh4goJYWFhY"
    "WFhYWFhYWFhlZWVlZWtra2tra2t4eHl5eXl5eVhYWFhYWFhYWFhiYmJiYmJia2tra2tra215"
    "eXl5eXl5XFxcXFxcXFxcXGJiYmJiYmJiYmttbW1tbW1td3d3d3dcXFxcXFxcXFxcXFxiYmJi"
    "YmJebW1tbW1tbW13d3d3d1xcXFxcXFxcXFxcXGNjY2NjY2NjY2NtbW10dHR0dHR0WlpaWlpa"
    "WlpaWlpaYGNjY2NjY2NjaWlpaXR0dHR0dHRaWlpaWlpaWlpaWlpgYGBgYGBgaWlpaWlpaXJy"
    "cnJyclpaWlpaWlpaWlpaWmBgYGBgYGBgaWlpaWlpaXJycnJy+vr6+vrX19fX17q6urq6urqs"
    "rKysrKysoqKiqqqqqqr6+vr6+tfX19fXurq6urq6uqysrKysrKyioqKqqqqqqvr6+vr619fX"
    "19fXurq6urq6rKysrKysoqKioqqqqqqq+vr6+vrX19fX19e6urq6urqsrKysrKyioqKiqqqq"
    "qqotLS0t+fno19fX17q6urq6sbasrKyspaWioqKqqqqqqi0tLS0t6Ojo6K2tra2xsbGxsbGs"
    "paWlpaWiqqqqqqqqJycnJycn6Ojo6K2trbGxsbGxsaWlpaWlpaWqqqqqqp8nJycnJycHBwcH"
    "ra2trbGxsbGdnaWlpaWlpZ+fn5+fn0BAQEBAQAcHBwcHnp6enp6dnZ2dnZ2lpaWfn5+fn5+f"
    "QEBAQEBAQAcHBwcHnp6enp6dnZ2dnZ2VlZWfn5+fn59AQEBAQEBAQAgICAgInp6enqidnZ2d"
    "lZWVlZWVn5+fn1VVVUBAQEBACAgICAgIfX2oqKioqJWVlZWVlZWOjo6OR0dHR0dHR0dqamoJ"
    "CQkJfX2Hh4eHh4eVlZWVlYuLi4tHR0dHR0dHR0dqagkJCQkJh4eHh4eHh4aGhouLi4uLi1ZW"
    "VkdHR0dHaGhoaG5ubm56enqHh4eGhoaGhouLi4uLS0tLS0tLS0toaGhubm5ubm56enp+hoaG"
    "hoaGkpaWlpZLS0tLS0tLS0tmZmZubm5ubn5+fn5+f39/kpKFhYWFhV1dXV1LS0tLS2ZmZmZm"
    "W3Z2dn5+fn5/f39/hYWFhYWFV1dXV1dXV1dXZmZmW1tbW3Z2dnZ2foODg4ODhYyMjIxXV1dX"
    "V1dXV1dXZ2dnZ2dndXV1dXV1g4N8fHx8jIyMjFlZWVlZWVlZSkpnZ2dnZ2dndXV1dXV1fHx8"
    "fHyAgICAWVlZWVlZU1NTU1NTZ2dnZ19zc3Nzc3NzfHyAgICAgIBTU1NTU1NTU1NTU1NlZWVl"
    "ZXNzc3Nzc3N4eHh4eICAgFhYWFhYWFhTU1NTU2VlZWVlZWVzc3NzeHh4eHh4eIKCWFhYWFhY"
    "WFhYWFhMZWVlZWVra2tra2treHl5eXl5eXlYWFhYWFhYWFhYYmJiYmJiYmtra2tra2tteXl5"
    "eXl5eVxcXFxcXFxcXE9PYmJiYmJiYmJrbW1tbW1td3d3d3d3XFxcXFxcXFxcXFxcYmJiYmJe"
    "Xl5tbW1tbW1td3d3d3dcXFxcXFxcXFxcXFxjY2NjY2NjY2NjbW10dHR0dHR0dFpaWlpaWlpa"
    "WlpaWmBgY2NjY2NjY2lpaWl0dHR0dHR0WlpaWlpaWlpaWlpaYGBgYGBgYGlpaWlpaWlycnJy"
    "cnJaWlpaWlpaWlpaWmBgYGBgYGBgYGlpaWlpaXJycnJycvn5+fn519fX19e6urq6urq6tra2"
    "rKysrKKiqqqqqqqq+fn5+fnX19fX1926urq6urq2trasrKysoqKqqqqqqqr5+fn5+fnX19fX"
    "3bq6urq6ura2tqysrKyioqqqqqqqqvn5+fn5+dfX193durq6urq2tra2rKyspaKiqqqqqqqq"
    "LS35+fn56Ojo3d26urq6sbG2tra2paWlpaWqqqqqqqonJycnJ+jo6Ojo6K2xsbGxsbG2tqWl"
    "paWlpaqqqqqqqicnJycnJ+jo6Ojora2xsbGxsbGlpaWlpaWlqqqqqp+fJycnJycnJwfo6Oit"
    "nrGxsbGxnZ2lpaWlpaWfn5+fn59AQEBAQEAHBwcHB56enp6enZ2dnZ2dpaWln5+fn5+fn0BA"
    "QEBAQEAHBwcICJ6enp6enZ2dnZ2dlZWVn5+fn5+fQEBAQEBAQEAICAgICJ6enqioqKidlZWV"
    "lZWVlZ+fn580NDQ0NDQ0NAgICAgICAmoqKioqKiVlZWVlZWVlaampkdHR0dHR0dHamoJCQkJ"
    "CQmHh4eHh4eHlZWVlZWLi4uLR0dHR0dHR0dHRwkJCQkJCQmHh4eHh4eGhoaLi4uWlpZHR0dH"
    "R0dHR0doaG5ubm5uenp6h4eHhoaGhoaWlpaWlktLS0tLS0tLS2hobm5ubm5ufn5+fn6SkpKS"
    "kpKWlpaWS0tLS0tLS0tLZmZmbm5ubn5+fn5+fn5/kpKSkoWFhYVLS0tLS0tLS0tmZmZbW1tb"
    "dnZ+fn5+fn9/f4WFhYWMjFdXV1dXV1dXV1dbW1tbW1t2dnZ2dYODg4ODg4yMjIyMV1dXV1dX"
    "V1dKSmdnZ2dnW3V1dXV1dYODg4ODfIyMjIxZWVlZWVlZSkpKZ2dnZ2dndXV1dXV1dXx8fHyA"
    "gICAgFlZWVlTU1NTU1NTU2dnX19fX3Nzc3Nzc3x8gICAgICAU1NTU1NTU1NTU1NTZWVlZWVf"
    "c3Nzc3NzeHh4eIKCgoJYWFhYWFhYU1NTU2VlZWVlZWVra3NwcHB4eHh4eIKCglhYWFhYWFhY"
    "WFhMTExlZWVra2tra2trcHB5eXl5eXl5WFhYWFhYT09PT2JiYmJiYmJra2tra2trbXl5eXl5"
    "eXlcXFxcXFxcXE9PT2JiYmJiYmJebW1tbW1tbXd3d3d3d1xcXFxcXFxcXFxcXGJiYl5eXl5e"
    "bW1tbW1td3d3d3d3XFxcXFxcXFxcXE1NY2NjY2NjY2NjY21tdHR0dHR0dHRaWlpaWlpaWlpa"
    "WlpgYGNjY2NjY2lpaWlpdHR0dHR0clpaWlpaWlpaWlpaYGBgYGBgYGBpaWlpaWlpcnJycnJy"
    "WlpaWlpaWlpaWlpgYGBgYGBgYGBpaWlpaWlycnJycnL5+fn5+fnd3d3d3d26urq6tra2tra2"
    "tbW1taqqqqqqqvn5+fn5+d3d3d3d3bq6urq2tra2tra1tbW1qqqqqqqq+fn5+fn53d3d3d3d"
    "urq6ura2tra2trW1tbWqqqqqqqr5+fn5+fn53d3d3d26urq6tra2tra2tbW1taqqqqqqqvn5"
    "+fn5+ejo3d3d3bq6urG2tra2tra1tbW1qqqqqqqqJycnJyfo6Ojo6OjdsbGxsbGxtra2paWl"
    "paWqqqqqqqonJycnJyfo6Ojo6OjWsbGxsbGxpaWlpaWlpaqqqp+fnycnJycnJyfo6Ojo1tbW"
    "sbGxsZ2dpaWlpaWln5+fn5+fQEBAQCcnBwcHBweenp6enp2dnZ2dna+vr6+fn5+fn59AQEBA"
    "QEBACAgICAienp6eqKidnZ2dr5WVlZWfn5+fnzQ0NDQ0NDQICAgICAgInqioqKioqJWVlZWV"
    "lZWmpqamNDQ0NDQ0NDQICAgICAkJqKioqKioqJWVlZWVlaampqZHR0dHR0dHR0cJCQkJCQkJ"
    "CYeHh4eHpKSklZWVlpaWlkdHR0dHR0dHR0cKCgoKCgoKoKCgoIeHpKSklpaWlpaWR0dHR0dH"
    "R0dHOWhubgoKCgugoKCgoJKSkpKWlpaWlpZLS0tLS0tLS0s5bm5ubm5uC35+fn5+kpKSkpKS"
    "lpaWlktLS0tLS0tLS0tmZltubm5+fn5+fn5+kpKSkpKFhYWMS0tLS0tLS0tLS1tbW1tbW3Z+"
    "fn5+fn5/kpKSjIyMjIxXV1dXV1dXV0pbW1tbW1tbW3V1dXWDg4ODg4OMjIyMjFdXV0pKSkpK"
    "SkpKZ2dbW1t1dXV1dXWDg4ODg4OMjIyMWVlZWVlKSkpKSkpnZ2dnZ3V1dXV1dXWDfHx8gICA"
    "gIBTU1NTU1NTU1NTU1NlX19fX19zc3Nzc3N4eICAgICAgFNTU1NTU1NTU1NTU2VlZWVfX3Nz"
    "c3NzeHh4eIKCgoKCWFhYWFhYWFNTTExMZWVlZWVla2twcHBweHh4eIKCgoJYWFhYWFhYWFhM"
    "TExMYmVla2tra2tra3BweXl5eXl5eU9PT09PT09PT09PYmJiYmJia2tra2trbW15eXl5eXl5"
    "XFxcXFxcT09PT09iYmJiYl5eXm1tbW1tbW13d3d3d3dcXFxcXFxcXFxcXE9iXl5eXl5eXm1t"
    "bW1tbXd3d3d3d1xcXFxcXFxNTU1NTWNjY2NjY2NjY2NtdHR0dHR0dHR0WlpaWlpaWlpaWlpN"
    "YGBgY2NjY2NpaWlpaXR0dHR0cnJaWlpaWlpaWlpaWmBgYGBgYGBgaWlpaWlpaXJycnJyclpa"
    "WlpaWlpaWk5OYGBgYGBgYGBgaWlpaWlpcnJycnJy+fn5+fn53d3d3d3dyMjIyLa2tra2trW1"
    "tbW1taqqqqr5+fn5+fnd3d3d3d3IyMjItra2tra2tbW1tbW1qqqqqvn5+fn5+d3d3d3d3cjI"
    "yMi2tra2tra1tbW1tbWqqqqq+fn5+fn5+d3d3d3dyMjIyLa2tra2trW1tbW1taqqqqr5+fn5"
    "+fno6N3d3d3IyMjItra2tra1tbW1tbWqqqqqqicnJycn6Ojo6Ojo3cjIyLGxtra2trW1tbW1"
    "tbCwsLCwJycnJycn+Ojo6OjW1taxsbu7u7u7paW1tbWwsLCwn58nJycnJyf4+Pj41tbW1ta7"
    "u7u7u7uvr6+vr6+fn5+fnyUlJSUlJSX4+PjW1tbW1ta7u7u7r6+vr6+vr5+fn5+fNDQ0NDQl"
    "JQgICAgInp6eqKioqKior6+vr6+VpqampqY0NDQ0NDQ0NAgICAgICKioqKioqKiolZWVlZWm"
    "pqampjQ0NDQ0NDQ0CAgICQkJCaioqKioqKSkpKSVlaampqamR0dHR0dHR0cmCQkJCgoKCqCg"
    "oKCgpKSkpKSklpaWlpZHR0dHR0dHR0cKCgoKCgoKoKCgoKCgpKSkpJaWlpaWlkdHR0dHOTk5"
    "OTk5CgoKCwsLoKCgoKCSkpKSkpaWlpaWS0tLS0tLSzk5OTlubgsLCwt+fn5+kpKSkpKSkpaW"
    "lpZLS0tLS0tLS0tLW1tbWwsLfn5+fn5+kpKSkpKSjIyMjEtLS0tLS0tLS1tbW1tbW1tbfn5+"
    "fn6Dg4OSjIyMjIyMSkpKSkpKSkpKSltbW1tbW1t1dXWDg4ODg4ODjIyMjIxKSkpKSkpKSkpK"
    "SmdbW1tbdXV1dXWDg4ODg4ODjIyMjEpKSkpKSkpKSkpKSmdfX19fdXV1dXWDg4ODg4CAgICA"
    "U1NTU1NTU1NTU1NTX19fX19fX3Nzc3NzeHiCgoKCgoJTU1NTU1NTU1NTU2VlZV9fX19fc3Nw"
    "cHB4eIKCgoKCglhYWFhYTExMTExMTGVlZWVla2trcHBwcHB4eIKCgoKCWFhYWFhYWExMTExM"
    "TExia2tra2tra3BwcHl5eXl5eXlPT09PT09PT09PT2JiYmJiYmtra2trbW1teXl5eXd3d1xc"
    "XE9PT09PT09PT2JiXl5eXl5ebW1tbW13d3d3d3d3XFxcXFxcXFxcT09PXl5eXl5eXl5tbW1t"
    "bW13d3d3d3dNTU1NTU1NTU1NTU1NY2NjY2NjY2NpZHR0dHR0dHR0dFpaWlpaWlpaWk1NTWBg"
    "YGBjY2NpaWlpaWl0dHRycnJyWlpaWlpaWlpaWmBgYGBgYGBgYGlpaWlpaWlycnJycnJaWlpa"
    "Tk5OTk5OTk5gYGBgYGBgYGlpaWlpaXJycnJycvn5+fn5+d3d3d3d3cjIyMjItra2trW1tbW1"
    "tbWwsLCw+fn5+fn53d3d3d3dyMjIyMi2tra2tbW1tbW1tbCwsLD5+fn5+fnd3d3d3d3IyMjI"
    "yLa2tra1tbW1tbW1sLCwsPn5+fn5+fnd3d3d3cjIyMjItra2trW1tbW1tbCwsLCw////////"
    "/+jd3d3dyMjIyMi2tra2tbW1tbW1sLCwsLAnJyf///j4+Ojo4dbWyMjIu7u7u7+1tbW1tbCw"
    "sLCwsCcnJyf4+Pj4+PjW1tbW1ru7u7u7u6+vr6+vsLCwsLCwJSUlJSX4+Pj4+NbW1tbWu7u7"
    "u7u7r6+vr6+vsLCwsLAlJSUlJSUl+Pj41tbW1tbWu7u7u6+vr6+vr6+mpqampjQ0NDQlJSUl"
    "CAjs7OzW1qioqKior6+vr6+vpqampqamNDQ0NDQ0NDQICAjs7OzsqKioqKiopKSkpJWmpqam"
    "pqY0NDQ0NDQ0NCYmCQkJCQmoqKioqKikpKSkpKSmpqampkdHR0dHR0cmJiYKCgoKCgqgoKCg"
    "oKSkpKSkpJaWlpaWR0dHR0c5OTk5OQoKCgoKCqCgoKCgoKSkpKSWlpaWlpY5OTk5OTk5OTk5"
    "OQsLCwsLC6CgoKCgkpKSkpKWlpaWlktLS0tLSzk5OTk5CwsLCwsLC35+fpKSkpKSkpKWlpaW"
    "S0tLS0tLS0tLW1tbW1sLC35+fn5+fpKSkpKSkoyMjIxLS0tLS0s+Pj5bW1tbW1tbDAx+fn6D"
    "g4ODg4yMjIyMjEpKSkpKSkpKSkpbW1tbW1tbdXV1g4ODg4ODg4yMjIyMSkpKSkpKSkpKSkpK"
    "W1tbW3V1dXV1g4ODg4ODg4yMjIxKSkpKSkpKSkpKSkpfX19fX191dXV1g4ODg4+AgICAgFNT"
    "U1NTU1NTU1NGX19fX19fX19zc3NzcI+CgoKCgoKCU1NTU1NTU1NTTExMZV9fX19fX3BwcHBw"
    "cIKCgoKCgoJMTExMTExMTExMTExMZWVlX2trcHBwcHBwcIKCgoKCgk9PT09PT0xMTExMTExM"
    "YlBra2tra3BwcHBweXl5eYSET09PT09PT09PT09PYmJiXl5ea2trbW1tbXd3d3d3d3dPT09P"
    "T09PT09PT09eXl5eXl5eXmRkZGRtd3d3d3d3d1xcXFxcXFxcT09PTV5eXl5eXl5eZGRkZGR0"
    "d3d3d3d3TU1NTU1NTU1NTU1NTWNjY2NjY2NjaWR0dHR0dHR0dHRaWlpaWlpaWk1NTU1gYGBg"
    "YGNjaWlpaWlpdHJycnJyclpaWlpaWlpaWk5gYGBgYGBgYGBpaWlpaWlycnJycnJyTk5OTk5O"
    "Tk5OTk5OYGBgYGBgYGlpaWlpaXJycnJycnL/////////3d3h4eHIyMjIyMi/v7+/tbW1tbWw"
    "sLCwsP/////////d3eHh4cjIyMjIyL+/v7+1tbW1tbCwsLCw/////////93h4eHhyMjIyMjI"
    "v7+/v7W1tbW1sLCwsLD/////////4eHh4eHIyMjIyMi/v7+/tbW1tbWwsLCwsP/////////4"
    "4eHh4eHIyMjIyL+/v7+1tbW1sLCwsLCw///////4+Pj44eHh4cjIyLu7u7+/v7W1tbWwsLCw"
    "sLAlJSUl+Pj4+Pj41tbW1ta7u7u7u7uvr6+vr7CwsLCwsCUlJSUlJfj4+PjW1tbW1ru7u7u7"
    "u6+vr6+vr7CwsLCwJSUlJSUlJfj4+OzW1tbW1ru7u7uvr6+vr6+vpqampqY0NCUlJSUlJezs"
    "7Ozs7OyoqKioqK+vr6+vr6ampqampjQ0NDQ0NDQmJibs7Ozs7KioqKioqKSkpKSkpqampqam"
    "NDQ0NDQ0JiYmJiYK7OzswcHBwcGkpKSkpKSkpqampqZHR0dHOTkmJiYmJgoKCgoKoKCgoKCk"
    "pKSkpKSWlpaWljk5OTk5OTk5OTkKCgoKCgugoKCgoKCkpKSklpaWlpaWOTk5OTk5OTk5OTkL"
    "CwsLCwugoKCgoJKSkpKSlpaWlpZLS0tLSzk5OTk5OQsLCwsLCwt+fn6SkpKSkpKSlpaWlktL"
    "S0tLPj4+PltbW1tbCwsMDH5+oaGhkpKSkoyMjIyMPj4+Pj4+Pj4+W1tbW1tbWwwMDAyhoaGD"
    "g4OMjIyMjIxKSkpKSkpKSkpKW1tbW1tbDAwMDIODg4ODg4OMjIyMjEpKSkpKSkpKSkpKSltb"
    "W1t1dXV1g4ODg4ODg4OMjIyYSkpKSkpKSkpKSkpfX19fX19fX3UNDYOPj4+Pj4KCmJhTU1NT"
    "U1NGRkZGRl9fX19fX19fX3BwcHCPgoKCgoKCgkxMTExMTExMTExMTF9fX19fX19wcHBwcHCC"
    "goKCgoKCTExMTExMTExMTExMTExQUFBQcHBwcHBwcHCCgoKCgoJPT09PT09PTExMTExMTFBQ"
    "UFBQa3BwcHBwcHmEhISEhE9PT09PT09PT09PT15eXl5eXl5rZGRkZGR3d3d3d3d3T09PT09P"
    "T09PT09PXl5eXl5eXmRkZGRkZHd3d3d3d3dNTU1NTU1NTU1NTU1eXl5eXl5eXmRkZGRkZHd3"
    "d3d3d01NTU1NTU1NTU1NTU1NY2NjY2NjaWRkZHR0dHR0dHt7WlpaWlpaTU1NTU1NYGBgYGBR"
    "UWlpaWlpaXJycnJycnJaWlpaTk5OTk5OTmBgYGBgYGBgaWlpaWlpcnJycnJyck5OTk5OTk5O"
    "Tk5OTk5gYGBgYGBUVGlpaWlycnJycnJy/////////+Hh4eHhyMjIyMi/v7+/v7+1tbW1sLCw"
    "sLD/////////4eHh4eHhyMjIyL+/v7+/v7W1tbWwsLCwsP/////////h4eHh4eHIyMjIv7+/"
    "v7+/tbW1tbCwsLCw/////////+/h4eHh4cjIyMi/v7+/v7+/tbWwsLCwsLD/////////7+Hh"
    "4eHhyMjIyL+/v7+/v7+1tbCwsLCwsP////////j4+OHh4eHhyLu7u7u/v7+/v7WwsLCwsLCw"
    "JSUlJfj4+Pj4+NbW1tbWu7u7u7u/v6+vr6+wsLCwsLAlJSUlJSX4+Pj41tbW1ta7u7u7u7uv"
    "r6+vr6+wsLCwpiUlJSUlJSUl+Ozs7OzW1ta7u7u7r6+vr6+vr6ampqamJSUlJSUlJSXs7Ozs"
    "7OzswcHBwcHBr7i4uLimpqampqY0NDQ0NCYmJiYm7Ozs7OzBwcHBwcGkpKSkuKampqampjQ0"
    "NDQ0JiYmJiYmJuzs7MHBwcHBwaSkpKSkpKampqamOTk5OTk5JiYmJiYKCgr09KCgoKCgpKSk"
    "pKSklpaWlpY5OTk5OTk5OTk5JgoL9PT0oKCgoKCgpKSysrKWlpaWljk5OTk5OTk5OTkuCwsL"
    "CwsLC6CgoKCSkpKSspaWlpaWS0s5OTk5OTk5OS4uCwsLCwsLC6GhoZKSkpKSkqmpqak+Pj4+"
    "Pj4+Pj4+W1tbWwwMDAwMoaGhoaGhkpKMjIyMjD4+Pj4+Pj4+Pj5bW1tbWwwMDAwMoaGhoaGD"
    "jIyMjIyMSkpKSkpKSkpKSltbW1tbWwwMDAyDg4ODg4ODjIyMjIxKSkpKSkpKSkpKSj09PT09"
    "PQ0NDQ2Dg4ODj4+PmJiYmEZGRkZGRkZGRkZGX19fX19fX18NDQ2Pj4+Pj4+PmJiYRkZGRkZG"
    "RkZGRkZfX19fX19fX19wcHBwj4KCgoKCgoJMTExMTExMTExMTExfX19fX19wcHBwcHBwgoKC"
    "goKCgkxMTExMTExMTExMTExQUFBQUFBwcHBwcHBwgoKCgoSET09PT09PT0xMTExMTFBQUFBQ"
    "UFBwcHBwcHCEhISEhIRPT09PT09PT09PT09eXl5eXl5eZGRkZGRkd3d3d3d3hE9PT09PT09P"
    "T09PXl5eXl5eXl5kZGRkZGR3d3d3d3d3TU1NTU1NTU1NTU1NXl5eXl5eXmRkZGRkZGR3d3d3"
    "d3tNTU1NTU1NTU1NTU1NTVFRUVFRUVFkZGFhdHR0dHt7e1paWk1NTU1NTU1NTWBgYGBRUVFR"
    "aWlpaWFycnJycnJyTk5OTk5OTk5OTk5OYGBgYGBgYGlpaWlpaXJycnJycnJOTk5OTk5OTk5O"
    "Tk5OTmBgYGBUVFRUVFRUcnJycnJybP///////+/v4eHh4eHIyNPT07+/v7+/v729vbCwsLCw"
    "////////7+/h4eHh4cjI09PTv7+/v7+/vb29sLCwsLD////////v7+Hh4eHh4dPT09O/v7+/"
    "v7+9vb2wsLCwsP///////+/v7+Hh4eHh09PT07+/v7+/vb29vbCwsLCw////////7+/v4eHh"
    "4eHT09PTv7+/v7+9vb29sLCwsLD////////47+/v4eHh4tPT09O/v7+/v729vb2wsLCwtyUl"
    "JRsb+Pj4+O/i4uLi4uK7u7vKv7+9vb29vbe3t7e3JSUlJRsbG/j4+OLi4uLi4rvKysrKyri4"
    "uLi4t7e3t7clJSUlJRsbGxvs7Ozs4uLiwcHKysq4uLi4uLi4pqampiUlJSUlGxsb7Ozs7Ozs"
    "7MHBwcHBwbi4uLi4uKampqamLCwsLCwmJiYmJuzs7OzswcHBwcHBpLi4uLi4prS0tLQsLCws"
    "LCwmJiYmJibs9PTBwcHBwcGkpKSkpKS0tLS0tDk5LCwsLCwmJiYm9PT09PT0oKCgoKSksrKy"
    "srK0tLS0OTk5OTk5OTk5Li709PT09PSgoKDGxrKysrKyspaWlpY5OTk5OTk5OTkuLi4LCwsL"
    "CwvGxsbGxrKysrKyqampqT4+Pj4+Pj45Li4uLi4LCwsLC6GhoaGhoZKSqampqampPj4+Pj4+"
    "Pj4+Pi4uLgwMDAwMDKGhoaGhoa6urqmpqak+Pj4+Pj4+Pj4+W1tbWwwMDAwMDKGhoaGhrq6M"
    "jIyMjEpKSkpKSkpKSj09PT09PT0MDAwNDYODg4OPj5iYmJiYSkpKSkpKSkpKSj09PT09PQ0N"
    "DQ0NDY+Pj4+Pj5iYmJhGRkZGRkZGRkZGRl9fX19fX18NDQ0Nj4+Pj4+Pj5iYmEZGRkZGRkZG"
    "RkZGX19fX19fX19wcHBwcI+CgoKCgoKCTExMTExMTExMTExMX19fX19fcHBwcHBwcIKCgoKC"
    "goJMTExMTExMTExMTExMUFBQUFBQcHBwcHBwcISEhISEhE9PT09PT09PTExMTExQUFBQUFBQ"
    "cHBwcHCEhISEhISET09PT09PT09PT09eXl5eXl5eZGRkZGRkZHd3d3d3hIRPT09PT09PT09P"
    "T15eXl5eXl5eZGRkZGRkZHd3d3d3d01NTU1NTU1NTU1NTV5eXl5eXl5kZGRkZGRkd3d7e3t7"
    "TU1NTU1NTU1NTU1NTVFRUVFRUVFRYWFhYWFhYXt7e3tNTU1NTU1NTU1NTU1gYFFRUVFRUWlp"
    "aWFhYXJycnJyck5OTk5OTk5OTk5OTk5gYGBgVFRUVFRpaWlycnJycnJyTk5OTk5OTk5OTk5O"
    "Tk5OYFRUVFRUVFRUVGxsbGxsbGz//////+/v7+/h4eHh09PT09PTv7+/v729vb29t7e3t///"
    "////7+/v7+Hh4eHT09PT09O/v7+/vb29vb23t7e3///////v7+/v4eHh4dPT09PT07+/v7+9"
    "vb29vbe3t7f//////+/v7+/v4eHh09PT09PTv7+/v729vb29t7e3txUVFRUV7+/v7+/v4eHT"
    "09PT09O/v7+9vb29vb23t7e3FRUVFRUV7+/v7+/i4uLi09PT08q/v729vb29t7e3t7cbGxsb"
    "Gxsb7+/v4uLi4uLiysrKysrKvb29vb23t7e3txsbGxsbGxsbG+Li4uLi4uLKysrKysq4uLi4"
    "uLe3t7e3GxsbGxsbGxsb7Ozs4uLi4sHKysrKuLi4uLi4uLe0tLQsLCwbGxsbGxvs7Ozs7MHB"
    "wcHBwcG4uLi4uLi4tLS0tCwsLCwsLCYmJibs7OzswcHBwcHBwbi4uLi4uLS0tLS0LCwsLCws"
    "LCYmJib09PT05sHBwcHBz6SksrK0tLS0tLQsLCwsLCwsLCYm9PT09PT09MbGxsaysrKysrKy"
    "tLS0tDk5OTk5OTk5Li4u9PT09PT0xsbGxsaysrKysrKyqampOTk5OTk5OS4uLi4uLgsLCwvG"
    "xsbGxsaysrKyqampqak+Pj4+Pj4+Pi4uLi4uLgsMDAyhoaGhoaGhrqmpqampqT4+Pj4+Pj4+"
    "Pj4uLi4MDAwMDAyhoaGhoaGurq6pqampPj4+Pj4+Pj4+PT09PT0MDAwMDAyhoaGhrq6urq6Y"
    "mJhKSkpKSkpKSj09PT09PT09DQ0NDQ0Nj4+Pj4+YmJiYmEZGRkZGRkZGRj09PT09PT0NDQ0N"
    "DQ2Pj4+Pj4+YmJiYRkZGRkZGRkZGRkZfX19fX19fDQ0NDY+Pj4+Pj4+YmJhGRkZGRkZGRkZG"
    "RkZfX19fX19fcHAODg6Pj4KCgoKCgkxMTExMTExMTExMTFBQUFBQUHBwcHBwcHCCgoKCgoKC"
    "TExMTExMTExMTExMUFBQUFBQUHBwcHBwcISEhISEhIRPT09PT09PT0VFRUVFUFBQUFBQUFBw"
    "cHCEhISEhISEhE9PT09PT09PT09PXl5eXl5eXmRkZGRkZGR3d3d3hISET09PT09PT09PT15e"
    "Xl5eXl5eZGRkZGRkZGR3d3d7e3tNTU1NTU1NTU1NTU1eXl5eXl5RZGRkZGRkZHt7e3t7e01N"
    "TU1NTU1NTU1NTU1RUVFRUVFRUWFhYWFhYWF7e3t7Tk5OTk5OTk1NTU1NYFFRUVFRUVFRYWFh"
    "YWFhcnJycnJOTk5OTk5OTk5OTk5OYGBgVFRUVFRUVFRhcmxsbGxsbE5OTk5OTk5OTk5OTk5O"
    "TlRUVFRUVFRUVFRsbGxsbGxsFRUVFRXv7+/v7+Hh4NPT09PT09O/v729vb29vbe3t7cVFRUV"
    "Fe/v7+/v4eHg09PT09PT07+/vb29vb29t7e3txUVFRUV7+/v7+/v4eDT09PT09PTv7+9vb29"
    "vb23t7e3FRUVFRUV7+/v7+/h4ODT09PT09O/v729vb29vbe3t7cVFRUVFRXv7+/v7+Lg4NPT"
    "09PT07+9vb29vb23t7e3txUVFRUVFRXv7+/v4uLi4tPT08rKysq9vb29vbe3t7e3GxsbGxsb"
    "Gxvv7+Li4uLi4srKysrKyr29vb29t7e3t7cbGxsbGxsbGxv14uLi4uLiysrKysrKuLi4uLi3"
    "t7e3txsbGxsbGxsbG/X14uLi4uLKysrKyri4uLi4uLi0tLS0LCwsLBsbGxsb7Ozs7ObmwcHB"
    "wc/PuLi4uLi4tLS0tLQsLCwsLCwsJiYYGOzm5ubmwcHBz8/Pz7i4uLS0tLS0tCwsLCwsLCws"
    "JhgY9PT05ubmwcHPz8/PsrKytLS0tLS0LCwsLCwsLCwsGPT09PT09PTGxsbGxrKysrKysrS0"
    "tLQvLy8vLy8vLi4uLi709PT0xsbGxsbGsrKysrKyqampqS8vLy8vLy8uLi4uLi4u9PTGxsbG"
    "xsbGsrKysqmpqampPj4+Pj4vLy8uLi4uLi4MDAwMoaGhoaGhrq6uqampqak+Pj4+Pj4+Pj4+"
    "Li4uDAwMDAwMoaGhoaGurq6urqmpqT4+Pj4+Pj4+PT09PT09DAwMDAwMoaGhoa6urq6umJiY"
    "SkpKMzMzMzM9PT09PT09PQ0NDQ0NDY+Pj4+PmJiYmJhGRkZGRkZGRkY9PT09PT09DQ0NDQ0N"
    "j4+Pj4+YmJiYmEZGRkZGRkZGRkZGX19fX182DQ0NDQ6Pj4+Pj4+YmJiYRkZGRkZGRkZGRkZG"
    "X19fXzY2Dg4ODg4ODo+CgoKCgqtMTExMTExMTExMTFBQUFBQUFBQcHBwcA4OhISEhISEhExM"
    "TExMTExMTExFRVBQUFBQUFBQcHBwcISEhISEhISET09PT0VFRUVFRUVFRVBQUFBQUFBkZGQP"
    "D4SEhISEhIRPT09PT09PT09FRV5eXl5eXl5kZGRkZGRkd3d3hISEhE1NTU1NTU1NREREXl5e"
    "Xl5eXmRkZGRkZGRke3t7e3t7TU1NTU1NTU1NTU1NUVFRUVFRUWRkZGRkYWF7e3t7e3tNTU1N"
    "TU1NTU1NTU1RUVFRUVFRUVFhYWFhYWFhe3t7e05OTk5OTk5OTk5OTlFRUVFRUVFRUWFhYWFh"
    "YWFsbGxsTk5OTk5OTk5OTk5OTk5IVFRUVFRUVFRUYWxsbGxsbGxOTk5OTk5OTk5OTk5OTkhU"
    "VFRUVFRUVFRUbGxsbGxsbBUVFRUVFe/v7+/v4ODg09PT09PTxcW9vb29vb23t7e3FRUVFRUV"
    "7+/v7+/g4ODg09PT09PFxb29vb29vbe3t7cVFRUVFRXv7+/v7+Dg4ODT09PT08XFxb29vb29"
    "t7e3txUVFRUVFe/v7+/v4ODg4NPT09PTxcXFvb29vbe3t7e3FRUVFRUVFe/v7+/g4ODg4NPT"
    "08rFxcW9vb29t7e3t7cVFRUVFRUVFe/v4uLi4ODgysrKysrFxcW9vb23t7e3txsbGxsbGxsb"
    "9fXi4uLi4uLKysrKysrFxb29t7e3t7e3GxsbGxsbGxv19fXi4uLi4srKysrKyri4uLi4t7e3"
    "t7cbGxsbGxsbG/X19fX14uLiysrKysrKuLi4uLi0tLS0tCwsLCwdHR0dGPX19ebm5ubmz8/P"
    "z8+4uLi4uLS0tLS0LCwsLCwsLBgYGBgY5ubm5ubmz8/Pz8/PuMC0tLS0tLQsLCwsLCwsGBgY"
    "GBj05ubm5ubPz8/Pz7KysrS0tLS0tCwsLCwsLCwsGBgY9PT09PTGxsbGxsaysrKysrK0tLS0"
    "Ly8vLy8vLy4uLi4u9PT09MbGxsbGxrKysrKysqmpqakvLy8vLy8vLy4uLi4uLu7u7u7GxsbG"
    "xrKysqmpqampqS8vLy8vLy8vLi4uLi4uDAzu7u6hoaGhrq6urqmpqampPj4+Pj4+Pj4+PT09"
    "LgwMDAwMDKGhoaGurq6urq6uqakzMzMzMzMzMzM9PT09PSAgDAwNDdra2q6urq6urpiYmDMz"
    "MzMzMzMzMz09PT09PSANDQ0NDQ2Pj4+PmJiYmJiYRkZGRkZGRkZGPT09PT09DQ0NDQ0NDY+P"
    "j4+PmJiYmJhGRkZGRkZGRkZGRjY2NjY2NjYNDg4ODo+Pj4+PmKurq0ZGRkZGRkZGODg4ODY2"
    "NjY2Ng4ODg4ODg4OgoKrq6urTExMTExMTEw4ODhQUFBQUFBQUA4ODg4ODoSEhISEhIRFRUVF"
    "RUVFRUVFRUVQUFBQUFBQUHBwDw8PhISEhISEhEVFRUVFRUVFRUVFRUVQUFBQUFBQZGQPDw+E"
    "hISEhISET09PT09PREREREREXl5eXl5kZGRkZGRkZGR7e3t7e3tNTU1NTU1EREREREReXl5e"
    "XmRkZGRkZGRke3t7e3t7e01NTU1NTU1NTU1NTVFRUVFRUVFkZGFhYWFhe3t7e3t7TU1NTU1N"
    "TU1NTU1RUVFRUVFRUVFhYWFhYWFhYXt7e3tOTk5OTk5OTk5OTk5RUVFRUVFRVFRhYWFhYWFs"
    "bGxsbE5OTk5OTk5OTk5OTkhISFRUVFRUVFRUVGxsbGxsbGxsTk5OTk5OTk5OTk5OSEhIVFRU"
    "VFRUVFRUVGxsbGxsbGwVFRUVFRUV7+3t7eDg4ODg09PTxcXFxcXFvb23t7e3txUVFRUVFRXv"
    "7e3t4ODg4ODT09PFxcXFxcW9vbe3t7e3FRUVFRUVFe3t7e3g4ODg4NPT08XFxcXFxb29t7e3"
    "t7cVFRUVFRUV7e3t7eDg4ODg4NPZxcXFxcXFxb23t7e3txUVFRUVFRXt7e3t4ODg4ODg2dnZ"
    "xcXFxcXFvb63t7e3FRUVFRUVFe3t7e3t4ODg4ODKysrFxcXFxcW+vr6+t7cdHR0bGxsb9fX1"
    "9fXi4uDgysrKysrFxcXFxb6+vr6+vh0dHR0dHR319fX19fXi4uLKysrKysrFxcDAvr6+vr6+"
    "HR0dHR0dHR319fX19ebm5uXPz8/Pz8DAwMDAwLS0tLQdHR0dHR0dHRj19fXm5ubm5s/Pz8/P"
    "z8DAwMC0tLS0tCwsLCwsLBgYGBgYGObm5ubmz8/Pz8/PwMDAwLS0tLS0LCwsLCwsGBgYGBgY"
    "GObm5ubmz8/Pz8/PssDAtLS0tLQvLy8vISEhIRgYGBj09PT0xsbGxsbGsrKysrKyvLy8vC8v"
    "Ly8vLy8vLi4uLvT07u7uxsbGxsbDw8PDw6mpqampLy8vLy8vLy8uLi4uLu7u7u7u7sbGxsPD"
    "w8PDqampqakvLy8vLy8vLy8uLi4uH+7u7u7u7qGhrq6urq6uqampqTMzMzMzMzMzMz09ICAg"
    "ICAgDNra2trarq6urq6urrm5MzMzMzMzMzMzPT09PSAgICAgDdra2trarq6urpiYmJgzMzMz"
    "MzMzMzM9PT09PSAgDQ0NDQ3a2o+Pj5iYmJiYmEZGRkZGRkZGMz09PT02NjYNDQ0NDQ2Pj4+P"
    "j5iYmJiYRkZGRkZGRjg4ODg2NjY2NjY2Dg4ODg4Oj4+Pq6urq6s4ODg4ODg4ODg4ODg2NjY2"
    "NjYODg4ODg4ODtSrq6urq0VFRUVFRUU4ODg4OFBQUFBQUFAODg4ODg+EhISEhISERUVFRUVF"
    "RUVFRUVFUFBQUFBQUFAPDw8PDw+EhISEhIRFRUVFRUVFRUVFRUVFUFBQUFBQZGQPDw8PD4SE"
    "hISEo0REREREREREREREREReXkJCQkJkZGRkZBAQe3t7e3t7REREREREREREREREREReQkJC"
    "QmRkZGRkZHt7e3t7e3tNTU1NTU1NTU1NRFFRUVFRUVFRUWFhYWFhYXt7e3t7e01NTU1NTU1N"
    "TU1NUVFRUVFRUVFRYWFhYWFhYWF7e3t7Tk5OTk5OTk5OSEhISFFRUVFRVFRUVGFhYWFsbGxs"
    "bGxOTk5OTk5OTk5ISEhISEhUVFRUVFRUVFRsbGxsbGxsbE5OTk5OTk5OTk5ISEhISFRUVFRU"
    "VFRUVGxsbGxsbGxsFRUVFRUV7e3t7e3g4ODg4ODZ2dnFxcXFxcW+vr6+vr4VFRUVFRXt7e3t"
    "7eDg4ODg4NnZ2cXFxcXFxb6+vr6+vhUVFRUVFe3t7e3t4ODg4ODg2dnZxcXFxcXFvr6+vr6+"
    "FRUVFRUV7e3t7e3t4ODg4NnZ2dnFxcXFxcW+vr6+vr4VFRUVFRXt7e3t7e3g4ODg2dnZ2cXF"
    "xcXFxb6+vr6+vh0dHf7+/v7t7e3t7eDg4ODZ2dnZxcXFxcXFvr6+vr6+HR0dHR0d/vX19fX1"
    "9eDg4NnZ2dnZxcXFxcW+vr6+vr4dHR0dHR0d9fX19fX15eXl5dnZ2dnFwMDAwMC+vr6+vh0d"
    "HR0dHR0d9fX19fXm5eXl5c/Pz8/AwMDAwMC+vrS0HR0dHR0dHRgYGPX15ubm5uXPz8/Pz8DA"
    "wMDAwLS0tLQhISEhISEYGBgYGBjm5ubm5s/Pz8/Pz8DAwMDAvLy8vCEhISEhISEYGBgYGBjm"
    "5ubm5s/Pz8/PwMDAwLy8vLy8ISEhISEhISEhGBgYGO7u7u7GxsbGw8PDw8PDvLy8vLwvLy8v"
    "Ly8vLx8fHx8f7u7u7u7uxsbDw8PDw8PDqampvC8vLy8vLy8vHx8fHx8f7u7u7u7u7sPDw8PD"
    "w8OpqampLy8vLy8vLy8vHx8fHx/u7u7u7u7a2q6urq6urrm5ubkzMzMzMzMzMzMzICAgICAg"
    "ICDa2tra2q6urq6urrm5uTMzMzMzMzMzMzM9PSAgICAgINra2tra2tqurq6YmJiYMzMzMzMz"
    "MzMzMz09PSAgICANDQ3a2traj4+YmJiYmJhGRkZGRkY4ODMzNjY2NjY2Ng0NDQ0Oj4+Pj4+r"
    "q6urqzg4ODg4ODg4ODg4NjY2NjY2Ng4ODg4ODtTUq6urq6urODg4ODg4ODg4ODg4NjY2NjY2"
    "Dg4ODg4ODtTUq6urq6tFRUVFRUVFODg4ODhQUFBQUFAODg4ODw8PD4SEhISjo0VFRUVFRUVF"
    "RUVFRVBQUFBQUFAPDw8PDw8PhISEo6OjRUVFRUVFRUVFRUVFRUJCQkJCQkIPDw8PEBAQhKOj"
    "o6NEREREREREREREREREQkJCQkJCQmRkZBARERF7e3t7e0REREREREREREREREREUUJCQkJC"
    "ZGRhYRERe3t7e3t7TU1NTU1NTU1ERERRUVFRUVFRUWFhYWFhYWF7e3t7e3tNTU1NTU1NTUg/"
    "UVFRUVFRUVFRUWFhYWFhYWFhe3t7e05OTk5OSEhISEhISEhIUVFUVFRUVFRhYWFsbGxsbGxs"
    "Tk5OTk5OSEhISEhISEhIVFRUVFRUVFRUbGxsbGxsbGxOTk5OTk5OSEhISEhISEhUVFRUVFRU"
    "VFRsbGxsbGxsbP7+/v7+/u3t7e3t7eDg4ODZ2dnZxcXFxcXFvr6+vr6+/v7+/v7+7e3t7e3t"
    "4ODg4NnZ2dnFxcXFxcW+vr6+vr7+/v7+/v7t7e3t7e3g4ODg2dnZ2cXFxcXFxb6+vr6+vv7+"
    "/v7+/v7t7e3t7eDg4ODZ2dnZ2cXFxcXFvr6+vr6+/v7+/v7+/u3t7e3t4ODg4NnZ2dnZxcXF"
    "xcW+vr6+vr7+/v7+/v7+/u3t7e3t5OTk2dnZ2dnFxcXFvr6+vr6+vh0dHR0d/v719fX19fXl"
    "5eXZ2dnZ2dnFxcDAvr6+vr6+HR0dHR0dHfX19fX19eXl5eXl2dnZwMDAwMDAvr6+vr4dHR0d"
    "HR0dHfX19fX15eXl5eXPz8/AwMDAwMDAwL6+vB0dHR0dHR0YGBgY9ebm5eXl5c/Pz8/AwMDA"
    "wMC8vLy8ISEhISEhIRgYGBgY9ubm5ublz8/Pz8DAwMDAvLy8vLwhISEhISEhIRgYGBj29vbm"
    "5ube3t7e3sPDwLy8vLy8vCEhISEhISEhISEYGPb27u7u7sbGw8PDw8PDw7y8vLy8Ly8vLy8v"
    "Lx8fHx8fH+7u7u7u7u7Dw8PDw8PDw7y8vLwvLy8vLy8vHx8fHx8fH+7u7u7u7u7Dw8PDw8PD"
    "ubm5uS8vLy8vLykpHx8fHx8fIO7u7u7a2trarq6urrm5ubm5MzMzMzMzMzMzMyAgICAgICDa"
    "2tra2trarq6uubm5ubkzMzMzMzMzMzMzICAgICAgICDa2tra2trax8fHubm5uTMzMzMzMzMz"
    "MzM9PSAgICAgDQ0N2tra2sfHx8eYmJirODg4ODg4ODgyMjY2NjY2NjY2Dg4ODtTU1NSrq6ur"
    "q6s4ODg4ODg4ODg4ODY2NjY2NjYODg4ODtTU1NSrq6urqzg4ODg4ODg4ODg4ODY2NjY2Ng4O"
    "Dg4ODtTU1Kurq6urRUVFRUVFRUU4ODg4UFBQUFAjIyMPDw8PDw8Po6Ojo6NFRUVFRUVFRUVF"
    "RUVQUFBQUFBQDw8PDw8PDw+jo6Ojo0VFRUVFRUVEREREREJCQkJCQkJCEBAQEBAQEKOjo6Oj"
    "REREREREREREREREREJCQkJCQkJCZBEREREREXt7e3tEREREREREREREREREUUJCQkJCQkJh"
    "YWEREXt7e3t7ez8/Pz8/Pz8/Pz8/P1FRUVFRUVFhYWFhYWFhe3t7e3t7SEhISEhISEhISD9R"
    "UVFRUVFRUWFhYWFhYWFhYRISe3tISEhISEhISEhISEhISEhUVFRUVFRUYWFsbGxsbGxsbEhI"
    "SEhISEhISEhISEhISFRUVFRUVFRUVGxsbGxsbGxsSEhISEhISEhISEhISEhIVFRUVFRUVFRU"
    "bGxsbGxsbGz+/v7+/v7+7e3t7e3k5OTk2dnZ2dnFxcXFzL6+vr6+vv7+/v7+/v7t7e3t7eTk"
    "5OTZ2dnZ2cXFxcXMvr6+vr6+/v7+/v7+/u3t7e3t5OTk5NnZ2dnZxcXFzMy+vr6+vr7+/v7+"
    "/v7+7e3t7e3k5OTk2dnZ2dnFxcXMzL6+vr6+vv7+/v7+/v7+7e3t7eTk5OTZ2dnZ2dnFzMzM"
    "vr6+vr6+/v7+/v7+/v7t7e3t5OTk5NnZ2dnZ2czMzMzMvr6+vr4dHR0d/v7+/vX19fXl5eXl"
    "5dnZ2dnZzMzMzMy+vr6+vh0dHR0dHR319fX19eXl5eXl5eXZ2cDAwMDAwMC+vr6+HR0dHR0d"
    "HRn19fX15eXl5eXl5d7ewMDAwMDAwMC8vLwhISEhIRkZGRgY9vb25eXl5eXe3t7ewMDAwMDA"
    "vLy8vCEhISEhISEhGBj29vb29uXl3t7e3t7ewMDAwLy8vLy8ISEhISEhISEhGPb29vb29vbe"
    "3t7e3t7Dw8O8vLy8vLwhISEhISEhISEfH/b29vbu7u7u3t7Dw8PDw8O8vLy8vC8vLy8vLx8f"
    "Hx8fHx/u7u7u7u7uw8PDw8PDw8O8vLy8KSkpKSkpKR8fHx8fHx/u7u7u7u7c3MPDw8PDubm5"
    "ubkpKSkpKSkpKSkfHx8fHyDu7u7a2tra3Nzcrrm5ubm5uTMzMzMzMzMzKSkgICAgICAg2tra"
    "2tra2sfHx7m5ubm5MzMzMzMzMzMzMyAgICAgICAg2tra2trax8fHx8e5ubkyMjIyMjIyMjIy"
    "MiIiIiAgIPf39/fa2sfHx8fHx6urqzg4ODg4MjIyMjI2NjY2NjY2Ng4ODtTU1NTUq6urq6ur"
    "ODg4ODg4ODg4ODg2NjY2NjYjDg4ODtTU1NTUq6urq6s4ODg4ODg4ODg4ODgwMDY2IyMjIw4O"
    "DtTU1NSrq6urq0VFRUVFRTc3Nzc3NzAwMDAjIyMjDw8PDw8Po6Ojo6OjRUVFRUVFRUVFNzc3"
    "N0JCQkJCQg8PDw8PDw8Qo6Ojo6NERERERERERERERERCQkJCQkJCQhAQEBAQEBARo6Ojo0RE"
    "RERERERERERERERCQkJCQkJCQhERERERERERe3t7RERERERERERERERERFFCQkJCQkJhYWER"
    "ERERe3t7e3s/Pz8/Pz8/Pz8/Pz8/UVFRUVE7YWFhYWFhYXt7e3t7e0hISEhISEhISEhIP1FR"
    "UVFRUTthYWFhYWFhEhISEhISSEhISEhISEhISEhISEhIVFRUVFRUVGFsbGxsbGxsbGxISEhI"
    "SEhISEhISEhISEhUVFRUVFRUVGxsbGxsbGxsbEhISEhISEhISEhISEhISFRUVFRUVFRUSUls"
    "bGxsbGxs/v7+/v7+/v7t7e3k5OTk5NnZ2dnZzMzMzMzMvr6+vr7+/v7+/v7+/u3t7eTk5OTk"
    "5NnZ2dnMzMzMzMy+vr6+vv7+/v7+/v7+7e3t5OTk5OTk2dnZ2czMzMzMzMy+vr6+/v7+/v7+"
    "/v7y8vLk5OTk5OTZ2dnZzMzMzMzMzL6+vr7+/v7+/v7+/vLy8vLk5OTk5NnZ2dnMzMzMzMzM"
    "vr6+vv7+/v7+/v7+8vLy8uTk5OTk2dnZ29vMzMzMzMzExMTEHf7+/v7+/v7y8vLy5eXl5eXl"
    "29vb28zMzMzMzMTExMQZGRkZGRkZGfLy8vLl5eXl5eXl29vbzMzMzMzExMTExBkZGRkZGRkZ"
    "GRn29uXl5eXl5d7e3t7AwMDAwMC8vLy8IRkZGRkZGRkZ9vb29vbl5eXe3t7e3t7Q0NDQvLy8"
    "vLwhISEhISEhGRn29vb29vb26t7e3t7e3tDQ0NC8vLy8vCEhISEhISEhIfb29vb29vbq6t7e"
    "3t7ew9DQ0Ly8vLy8ISEhISEhIR8fHx/29vb27u7q6t7ew8PDw8PDvLy8vLwpKSkpKSkfHx8f"
    "Hx8f+/vu7u7u3Nzc3MPDw8O5ubm5uSkpKSkpKSkpHx8fHx/7+/v7++7c3Nzc3Nzcubm5ubm5"
    "KSkpKSkpKSkpKR8fH/v7+/v72tra3Nzc3Ny5ubm5ubkzMzMzKSkpKSkpIiAgICAgIPfa2tra"
    "2sfHx8fHubm5uTIyMjIyMjIyMiIiIiIiIiD39/f399rax8fHx8fHx7m5MjIyMjIyMjIyMjIi"
    "IiIiIvf39/f399THx8fHx8erq6syMjIyMjIyMjIyMjY2NjY2NiP39/fU1NTU1NSrq6urqzg4"
    "ODg4ODg4ODgwMDY2NjYjIyMjI9TU1NTU1Kurq6urODg4ODg4ODg4ODAwMDAwMCMjIyMjIw/U"
    "1NTUo6Orq6s3Nzc3Nzc3Nzc3NzcwMDAwIyMjIw8PDw8PD6Ojo6Ojozc3Nzc3Nzc3Nzc3N0JC"
    "QkJCQkIQEBAQEBAQo6Ojo6OjRERERERERERERERCQkJCQkJCQkIQEBAQEBEREaOjo6NERERE"
    "RERERERERERCQkJCQkJCQkIRERERERERERF7ez8/Pz8/Pz8/Pz8/Pz8/QkJCQkJCYWERERER"
    "ERF7e3t7Pz8/Pz8/Pz8/Pz8/Pz87Ozs7OzthYWFhYRISEhISEhJISEhISEhISEhISEg/UTs7"
    "Ozs7O2FhYWFhEhISEhISEkhISEhISEhISEhISEhISFRUVFRUVDw8PGxsbGxsbGwTSEhISEhI"
    "SEhISEhISEhIVFRUVFRUVFRsbGxsbGxsbBNBQUFBQUFBQUFBQUFBQUFDQ0NDQ0NDSUlJSUls"
    "bGxsE/7+/v7+/v7y8vLy5OTk5OTk2dvb29vMzMzMzMzExMTE/v7+/v7+/vLy8vLk5OTk5OTZ"
    "29vb28zMzMzMzMTExMT+/v7+/v7+8vLy8vLk5OTk5Nvb29vbzMzMzMzMxMTExP7+/v7+/v7y"
    "8vLy8uTk5OTk29vb29vMzMzMzMzExMTE/v7+/v7+/vLy8vLy5OTk5OTb29vb28zMzMzMxMTE"
    "xMT9/f39/f398vLy8vLy5OTk5Nvb29vbzMzMzMzExMTExBkZGRkZGf398vLy8vLl5eXl29vb"
    "29vbzMzMzMTExMTEGRkZGRkZGRkZ8vLy8uXl5eXl29vb29vMzMzMxMTExMQZGRkZGRkZGRkZ"
    "9vb25eXl5d7e3t7e0NDQ0NDQxMTExBkZGRkZGRkZGfb29vb29urq3t7e3t7e0NDQ0NC8vLy8"
    "ISEhISEZGRkZ9vb29vb26urq3t7e3t7Q0NDQ0Ly8vLweHh4eHh4eHh729vb29vbq6urq3t7e"
    "3tDQ0NDQvLy8vB4eHh4eHh4eHh8fH/b2+/vq6urq3Nzcw8PDw8nJycnJKSkpKSkpKR8fHx8f"
    "+/v7+/v73Nzc3Nzc3NzDubm5ubkpKSkpKSkpKSkfHx/7+/v7+/v73Nzc3Nzc3Lm5ubm5uSkp"
    "KSkpKSkpKSkpH/v7+/v7+/va3Nzc3Nzcubm5ubm5MjIyKSkpKSkpIiIiIiIi9/f39/fa2sfH"
    "x8fHx7m5ubkyMjIyMjIyMjIiIiIiIiIi9/f39/f3x8fHx8fHx8e5uTIyMjIyMjIyMjIiIiIi"
    "IiL39/f39/fU1MfHx8fHq6urMjIyMjIyMjIyMjI2NjY2IyMjI/fU1NTU1NTUq6urq6s4ODg4"
    "ODg4ODAwMDAwMDAjIyMjIyPU1NTU1NTUq6urqzc3Nzc3Nzc3NzAwMDAwMDAjIyMjIyMP1NTU"
    "1KOjo6OjNzc3Nzc3Nzc3NzcwMDAwMCMjIyMPDw8QEBCjo6Ojo6M3Nzc3Nzc3Nzc3NzdCQkJC"
    "QkJCEBAQEBAQEKOjo6Ojo0REREREREREREREQkJCQkJCQkJCEBAQERERERGjo6OjRERERERE"
    "REREREQ1QkJCQkJCQkIqERERERERERER0dE/Pz8/Pz8/Pz8/Pz8/Ozs7Ozs7OyoqKhERERES"
    "EhIS1T8/Pz8/Pz8/Pz8/Pz87Ozs7Ozs7O2FhYRISEhISEhISSEhISEhISEhISEhIOjo7Ozs7"
    "Ozs8PDw8PBISEhISEhJISEhISEhISEhISEhISEhUVFRUVDw8PDw8bGxsbBMTE0hISEhISEhI"
    "SEhISEhIQ0NDQ0NDQ0lJSUlJbGxsExMTQUFBQUFBQUFBQUFBQUFDQ0NDQ0NDSUlJSUlJSUkT"
    "ExP9/f39/f398vLy8vLk5OTk5Nvb29vbzMzMzMzExMTExP39/f39/f3y8vLy8uTk5OTk29vb"
    "29vMzMzMzMTExMTE/f39/f39/fLy8vLy5OTk5OTb29vb28zMzMzMxMTExMT9/f39/f398vLy"
    "8vLk5OTk5Nvb29vbzMzMzMzExMTExP39/f39/f3y8vLy8vLn5+fn29vb29vbzMzMzMTExMTE"
    "/f39/f39/f3y8vLy8ufn5+fb29vb29vMzMzExMTExMQZGRkZGf39/fLy8vLy5+fn59vb29vb"
    "28zMzMTExMTExBkZGRkZGRkZGfLy8vLn5+fn59vb29vb0NDQ0MTExMTEGRkZGRkZGRkZ9vb2"
    "9vbq6ure3t7e3tDQ0NDQ0MTExMQZGRkZGRkZGRn29vb29urq6ure3t7e0NDQ0NDQ0Ly8vB4e"
    "Hh4eHh4eHvb29vb26urq6ure3t7Q0NDQ0NDJycnJHh4eHh4eHh4eHvb29vbq6urq6ure3t7Q"
    "0NDQycnJyckeHh4eHh4eHh4eHvv7+/v76urq3Nzc3Nzc3MnJycnJySkpKSkpKSkpHh8f+/v7"
    "+/v7+9zc3Nzc3Nzc3LnJycnJKSkpKSkpKSkpKR/7+/v7+/v7+9zc3Nzc3Ny5ubm5ubkpKSkp"
    "KSkpKSkpIiL7+/v7+/v73Nzc3Nzcx8e5ubm5uTIyMjIyMjIiIiIiIiIiIvf39/f39/fHx8fH"
    "x8fHubm5MjIyMjIyMjIyIiIiIiIi9/f39/f398fHx8fHx8fNzc0yMjIyMjIyMjIyIiIiIiIi"
    "9/f39/f31NTHx8fHzc3NzTIyMjIyMjIyMjIwMDAwIyMjIyMj1NTU1NTU1Kurq6urNzc3Nzc3"
    "NzAwMDAwMDAwIyMjIyMj1NTU1NTUy8vLy8s3Nzc3Nzc3NzcwMDAwMDAwIyMjIyMj8/Pz86Oj"
    "o8vLyzc3Nzc3Nzc3Nzc3MDAwMDAoKCMjEBAQEBDzo6Ojo6OjNzc3Nzc3Nzc3Nzc3QkJCQkIo"
    "KCgQEBAQEBCjo6Ojo6NERERERERENTU1NTVCQkJCQkJCKioRERERERER0dHR0T8/Pz8/Pz8/"
    "PzU1NTVCQkJCQkIqKioRERERERER0dHRPz8/Pz8/Pz8/Pz8/Ozs7Ozs7OzsqKioqEhISEhIS"
    "1dU/Pz8/Pz8/Pz8/Pz87Ozs7Ozs7Ozs8PDwSEhISEhIS1UhISEhISEhIOjo6Ojo6Ozs7Ozs8"
    "PDw8PDwSEhISEhISSEhISEhISEhISEhIOjo6Q0NDQzw8PDw8PDxsExMTExNBQUFBQUFBQUFB"
    "QUFBQ0NDQ0NDQ0NJSUlJSUlJExMTE0FBQUFBQUFBQUFBQUFBQ0NDQ0NDQ0lJSUlJSUlJExMT"
    "/f39/f39/fLy8vLy5+fn5+fb29vb29vMzMzExMTExMT9/f39/f398vLy8vLn5+fn59vb29vb"
    "28zMzMTExMTExP39/f39/f3y8vLy8ufn5+fn29vb29vbzMzMxMTExMTE/f39/f39/f3y8vLy"
    "5+fn5+fb29vb29vMzMzExMTExMT9/f39/f39/fLy8vLn5+fn59vb29vb28zMzMTExMTExP39"
    "/f39/f398vLy8ufn5+fn29vb29vb2NjYxMTExMTEGRkZGf39/f398vLy5+fn5+fn29vb29vY"
    "2NjExMTExMQZGRkZGRkZGRny8vHx5+fn5+fj29vb0NDQ0NDExMTExBkZGRkZGRkZGfz8/Pbq"
    "6urq6t7e3t7Q0NDQ0NDQzs7OHh4eHh4eGRn8/Pz8/Orq6urq6t7e3tDQ0NDQ0MnJyckeHh4e"
    "Hh4eHh78/Pz86urq6urq6t7e0NDQ0NDJycnJyR4eHh4eHh4eHh78/Pz86urq6urq6t/f39DQ"
    "ycnJycnJHh4eHh4eHh4eHh77+/v7+/vq6tzc3Nzc3N/JycnJyckpKSkpKSkpKR4e+/v7+/v7"
    "+/vc3Nzc3Nzc3NLS0snJySkpKSkpKSkpKSkX+/v7+/v7+/vc3Nzc3Nzc0tLS0tLSKSkpKSkp"
    "JCQkJCIiFxf7+/v76+vr69zcx8fH0tLS0tIyMjIyMiQkJCIiIiIiIiL39/f39/frx8fHx8fH"
    "zc3NzTIyMjIyMjIyIiIiIiIiIvf39/f39/fpx8fHx83Nzc3NMjIyMjIyMjIyKyIiIiIiGhr3"
    "9/f36enp6enHzc3Nzc0yMjIyMisrKysrMDAwMCMjIyMjI9TU1NTU1NTLy8vLyzc3Nzc3Nzcw"
    "MDAwMDAwMCMjIyMjI/PU1NTUy8vLy8vLNzc3Nzc3Nzc3MDAwMDAwMCMjIyMj8/Pz8/Pzy8vL"
    "y8s3Nzc3Nzc3Nzc3MTEwMCgoKCgoKBAQ8/Pz8/Ojo6Ojozc3Nzc3Nzc3NzExMTFCQigoKCgo"
    "EBAQEBAR0dHR0dHRNTU1NTU1NTU1NTU1NUJCQkJCKioqKhERERER0dHR0dE/Pz8/Pz8/NTU1"
    "NTU1NTs7OyoqKioqKioRERER0dHR0T8/Pz8/Pz8/Pz8/Pzs7Ozs7Ozs7KioqKhISEhIS1dXV"
    "Pz8/Pz8/Pz8/Pzo6Ozs7Ozs7Ozs8PDw8EhISEhIS1dVISEg6Ojo6Ojo6Ojo6Ojs7Ozs7PDw8"
    "PDw8PBISEhMTE0hISEhISEhIOjo6Ojo6Q0NDQ0M8PDw8PDw8ExMTExMTQUFBQUFBQUFBQUFB"
    "QUNDQ0NDQ0NDSUlJSUlJSRMTExNBQUFBQUFBQUFBQUFBQUNDQ0NDQ0NJSUlJSUlJSRMTFP39"
    "/f39/f398vLy5+fn5+fn29vb29vY2NjY2MTExMTE/f39/f39/f3y8vLn5+fn5+fb29vb29jY"
    "2NjYxMTExMT9/f39/f39/fLy8ufn5+fn59vb29vb2NjY2NjExMTExP39/f39/f398vLy5+fn"
    "5+fn49vb29vY2NjY2MTExMTE/f39/f39/f398vHx5+fn5+fj49vb29jY2NjYxMTExMT9/f39"
    "/f39/f3x8fHn5+fn5+Pj49vY2NjY2NjOzs7OzhYWFhYWFhYWFvHx8fHn5+fn4+Pj49jY2NjY"
    "2M7Ozs7OFhYWFhYWFhYW/PHx8fHn5+Pj4+Pj2NjY2NjYzs7Ozs4eHh4WFhYWFvz8/Pz88erq"
    "6urj4+Pf0NDQ0NDQzs7Ozh4eHh4eHh78/Pz8/Pz86urq6urq39/f39DQ0MnJycnJHh4eHh4e"
    "Hh78/Pz8/Pzq6urq6urf39/f39/JycnJyckeHh4eHh4eHhz8/Pz8/PDw8PDw6t/f39/f38nJ"
    "ycnJyR4eHh4cHBwcHBwc+/v7+/Dw8PDc3Nzc39/fycnJycnJKSkpKSkkHBwcHBcX+/v7+/v7"
    "6+vc3Nzc3NLS0tLS0tIkJCQkJCQkJCQkFxcXFxf7++vr6+vr69zc0tLS0tLS0iQkJCQkJCQk"
    "JCQkFxcXFxcX6+vr6+vr68fS0tLS0tLSJCQkJCQkJCQkIiIiIiIX9/f39/fr6+npx8fNzc3N"
    "zc0yMjIyMisrKysiIiIiIhoa9/f39+np6enp6c3Nzc3NzSsrKysrKysrKysrKxoaGhoaGhr3"
    "6enp6enp6c3Nzc3NKysrKysrKysrKysrMBoaGhoaGhrp6enp6enLy8vLy8s3Nzc3NzExMDAw"
    "MDAwMDAjIyMjI/Pz8/Pz88vLy8vLyzc3Nzc3MTExMTExMDAwKCgoKCgo8/Pz8/Pz88vLy8vL"
    "Nzc3NzExMTExMTExMSgoKCgoKCgo8/Pz8/Pz0dHR0dE1NTU1NTU1NTUxMTExKCgoKCgoKCgq"
    "EfPz0dHR0dHR0TU1NTU1NTU1NTU1NTU1NUIqKioqKioqKhER0dHR0dHRPz8/PzU1NTU1NTU1"
    "NTs7OzsqKioqKioqKhIS1dXV1dU/Pz8/Pz8/Pz8/Pzs7Ozs7Ozs7KioqKioSEhIS1dXV1To6"
    "Ojo6Ojo6Ojo6Ojs7Ozs7Ozs8PDw8PBISEhIS1dXVOjo6Ojo6Ojo6Ojo6Ojo6Ozs7PDw8PDw8"
    "PDwSExMTExNBQUFBQUFBQUE6Ojo6Q0NDQ0NDPDw8PDxJSRMTExMTE0FBQUFBQUFBQUFBQUND"
    "Q0NDQ0NDSUlJSUlJSRMTExMTQUFBQUFBQUFBQUFBQUNDQ0NDQ0NDSUlJSUlJSUkUFBT9/f39"
    "/f39/fHx8fHn5+fn4+Pj49vY2NjY2NjOzs7Ozv39/f39/f398fHx8efn5+fj4+Pj29jY2NjY"
    "2M7Ozs7O/f39/f39/f3x8fHx5+fn5+Pj4+Pj2NjY2NjYzs7Ozs4WFhYWFhYWFvHx8fHx5+fn"
    "4+Pj4+PY2NjY2NjOzs7OzhYWFhYWFhYW8fHx8fHn5+fj4+Pj49jY2NjY2M7Ozs7OFhYWFhYW"
    "Fhbx8fHx8fHn5+Pj4+Pj2NjY2NjYzs7Ozs4WFhYWFhYWFhbx8fHx8efn4+Pj4+PY2NjY2NjO"
    "zs7OzhYWFhYWFhYWFvzx8fHx8ePj4+Pj4+PY2NjY2M7Ozs7OFhYWFhYWFvz8/Pz8/PHq6urj"
    "4+Pf39/f39DOzs7Ozs4eHh4eHhz8/Pz8/Pz8/PDw8PDq39/f39/f38nJycnJyRwcHBwcHBwc"
    "/Pz8/Pz88PDw8PDf39/f39/fycnJycnJHBwcHBwcHBwcHPz8/PDw8PDw8PDf39/f39/JycnJ"
    "yckcHBwcHBwcHBwcHBcX+/Dw8PDw6+vf39/f0tLS0snJySQkJCQkJCQcHBcXFxcXFxfr6+vr"
    "6+vr69LS0tLS0tLSJCQkJCQkJCQkJBcXFxcXFxfr6+vr6+vr0tLS0tLS0tIkJCQkJCQkJCQk"
    "JBcXFxcXF+vr6+vr6+vr0tLS0tLS0iQkJCQkJCQkJCQiIiIXFxr39/fr6enp6enNzc3Nzc3N"
    "KysrKysrKysrKysiGhoaGhoaGunp6enp6enNzc3Nzc0rKysrKysrKysrKysaGhoaGhoaGunp"
    "6enp6enNzc3NzSsrKysrKysrKysrKysaGhoaGhoa6enp6enpy8vLy8vLMTExMTExMTExMDAw"
    "MDAoKCgoI/Pz8/Pz8/PLy8vLy8sxMTExMTExMTExMTEoKCgoKCgoKPPz8/Pz8/PLy8vLyzEx"
    "MTExMTExMTExMTEoKCgoKCgoKPPz8/Pz0dHR0dHRNTU1NTU1NTU1NTU1MSgoKCgoKCgqKirz"
    "0dHR0dHR0dE1NTU1NTU1NTU1NTU1NTUqKioqKioqKioq0dHR0dHR0TU1NTU1NTU1NTU1NTU7"
    "Ozs7KioqKioqKioS1dXV1dXVPz8/Pzo6Ojo6Ojo7Ozs7Ozs7OyoqKioSEhIS1dXV1dU6Ojo6"
    "Ojo6Ojo6Ojo6Ozs7Ozs8PDw8PDwSEhIS1dXV1To6Ojo6Ojo6Ojo6Ojo6Ojs7PDw8PDw8PDwT"
    "ExMTExMTQUFBQUFBQUFBQTo6Q0NDQ0NDQ0M8PElJSUkTExMTExNBQUFBQUFBQUFBQUFDQ0ND"
    "Q0NDQ0lJSUlJSUkTExMTE0FBQUFBQUFBQUFBQUFDQ0NDQ0NDSUlJSUlJSUkUFBQUFhYWFhYW"
    "Fhbx8fHx8efn4+Pj4+Pj2NjY2NjYzs7Ozs4WFhYWFhYWFvHx8fHx5+fj4+Pj4+PY2NjY2NjO"
    "zs7OzhYWFhYWFhYW8fHx8fHx5+Pj4+Pj49jY2NjY2M7Ozs7OFhYWFhYWFhbx8fHx8fHn4+Pj"
    "4+Pj2NjY2NjYzs7Ozs4WFhYWFhYWFvHx8fHx8efj4+Pj4+PY2NjY2NjOzs7OzhYWFhYWFhYW"
    "FvHx8fHx8ePj4+Pj49jY2NjY2M7Ozs7OFhYWFhYWFhYW8fHx8fHx4+Pj4+Pj2NjY2NjOzs7O"
    "zs4WFhYWFhYWFvz8/PHx8fHj4+Pj4+Pf39jY2M7Ozs7OzhwcHBYWFvz8/Pz8/Pzw8PDw8OPj"
    "39/f39/fyc7Ozs7OHBwcHBwcHPz8/Pz8/PDw8PDw8N/f39/f39/JycnJyckcHBwcHBwcHBz8"
    "/Pz88PDw8PDw8N/f39/f38nJycnJyRwcHBwcHBwcHBwc/Pzw8PDw8PDw39/f39/fycnJycnJ"
    "HBwcHBwcHBwcHBcXFxfw8PDw6+vr69/f39LS0tLS0tIkJCQkJCQkJBcXFxcXFxcX6+vr6+vr"
    "6+vS0tLS0tLS0iQkJCQkJCQkJBcXFxcXFxcX6+vr6+vr69LS0tLS0tLSJCQkJCQkJCQkJBcX"
    "FxcXFxfr6+vr6+vr683Nzc3Nzc0rKyQkJCQkJCQkJBoaGhoaGhrp6enp6enpzc3Nzc3NzSsr"
    "KysrKysrKysrGhoaGhoaGhrp6enp6enpzc3Nzc3NKysrKysrKysrKysrGhoaGhoaGhrp6enp"
    "6enpy83Nzc0rKysrKysrKysrKysaGhoaGhoaGvPz6enpy8vLy8vLyzExMTExMTExMTExMSgo"
    "KCgoKCjz8/Pz8/Pzy8vLy8vLMTExMTExMTExMTExKCgoKCgoKCjz8/Pz8/Pzy8vLy8sxMTEx"
    "MTExMTExMTEoKCgoKCgoKCjz8/Pz89HR0dHR0TU1NTU1NTU1NTU1NTUoKCgoKCoqKioqKtHR"
    "0dHR0dHRNTU1NTU1NTU1NTU1NTU1KioqKioqKioqKtHR0dHR0dE1NTU1NTU1NTU1NTU7Ozs7"
    "OyoqKioqKioq1dXV1dXV1To6Ojo6Ojo6Ojo6Ozs7Ozs7Ozs8PDw8EhIS1dXV1dXVOjo6Ojo6"
    "Ojo6Ojo6Ojs7Ozs8PDw8PDw8PBIS1dXV1dU6Ojo6Ojo6Ojo6Ojo6OkNDQzw8PDw8PDw8ExMT"
    "ExMTE0FBQUFBQUFBQUFBQ0NDQ0NDQ0NDSUlJSUlJExMTExMTQUFBQUFBQUFBQUFBQ0NDQ0ND"
    "Q0NJSUlJSUlJExMTFBRBQUFBQUFBQUFBQUFDQ0NDQ0NDQ0lJSUlJSUkUFBQUFBYWFhYWFhYW"
    "8fHx8fHx4+Pj4+Pj49jY2NjY2M7Ozs7OFhYWFhYWFhbx8fHx8fHj4+Pj4+Pj2NjY2NjYzs7O"
    "zs4WFhYWFhYWFvHx8fHx8ePj4+Pj4+PY2NjY2NjOzs7OzhYWFhYWFhYW8fHx8fHx8ePj4+Pj"
    "49jY2NjY2M7Ozs7OFhYWFhYWFhbx8fHx8fHx4+Pj4+Pj2NjY2NjOzs7Ozs4WFhYWFhYWFhbx"
    "8fHx8fHj4+Pj4+PY2NjY2M7Ozs7OzhYWFhYWFhYWFvHx8fHx8ePj4+Pj49/Y2NjYzs7Ozs7O"
    "FhYWFhYWFhb8/Pz88fHw8OPj4+Pf39/f39jOzs7Ozs4cHBwcHBwc/Pz8/Pz88PDw8PDw39/f"
    "39/f39/Ozs7OzhwcHBwcHBwc/Pz8/PDw8PDw8PDf39/f39/f38nJycnJHBwcHBwcHBwcHPz8"
    "8PDw8PDw8PDf39/f39/fycnJyckcHBwcHBwcHBwcHBfw8PDw8PDw8N/f39/f39LS0tLJyRwc"
    "HBwcHBwcHBcXFxcXF/Dw6+vr6+vr39LS0tLS0tLSJCQkJCQkJCQXFxcXFxcXF+vr6+vr6+vr"
    "0tLS0tLS0tIkJCQkJCQkJCQXFxcXFxcXF+vr6+vr6+vS0tLS0tLS0iQkJCQkJCQkJCQXFxcX"
    "FxcX6+vr6+vr6+nNzc3Nzc3NKysrKysrKysrJBoaGhoaGhoa6enp6enp6c3Nzc3Nzc0rKysr"
    "KysrKysrKxoaGhoaGhoa6enp6enp6c3Nzc3NzSsrKysrKysrKysrGhoaGhoaGhoa6enp6enp"
    "y8vLy8vLKysrKysrKysrKysrGhoaGhoaGvPz8/Pz88vLy8vLy8sxMTExMTExMTExMTEoKCgo"
    "KCgo8/Pz8/Pz88vLy8vLyzExMTExMTExMTExMSgoKCgoKCgo8/Pz8/Pz88vLy8vLMTExMTEx"
    "MTExMTExKCgoKCgoKCgo8/Pz89HR0dHR0dE1NTU1NTU1NTU1NTU1KCgoKCoqKioqKirR0dHR"
    "0dHR0TU1NTU1NTU1NTU1NTU1OyoqKioqKioqKirV0dHR0dHRNTU1NTU1NTU1NTU1Ozs7Ozsq"
    "KioqKioq1dXV1dXV1dU6Ojo6Ojo6Ojo6Ojo7Ozs7Ozs8PDw8PBIS1dXV1dXV1To6Ojo6Ojo6"
    "Ojo6Ojo6Ozs8PDw8PDw8PDwSE9XV1dXVOjo6Ojo6Ojo6Ojo6OkNDQ0M8PDw8PDw8ExMTExMT"
    "ExNBQUFBQUFBQUFBQ0NDQ0NDQ0NDSUlJSUlJSRMTExMTE0FBQUFBQUFBQUFBQ0NDQ0NDQ0ND"
    "SUlJSUlJSRQUFBQUQUFBQUFBQUFBQUFBQ0NDQ0NDQ0NJSUlJSUlJFBQUFBQ="
)
