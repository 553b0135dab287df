"""Customisations for the weather widget admin site."""

from django.contrib import admin

admin.site.site_header = "Weather Widget Administration"
admin.site.site_title = "Weather Widget Admin"
admin.site.index_title = "Widget placement and options"
# Counterpart of the plugin list "Settings" link: the admin header's
# "View site" link lands on the widget settings page.
admin.site.site_url = "/settings/"
