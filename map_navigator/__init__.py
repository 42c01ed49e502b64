"""Map navigator.

Turns a free-text Chinese travel request ("从北京西站到天安门") into an
AMap or Baidu Maps driving-route deep link and opens it in the browser.
Speech input is transcribed through the iFlytek dictation service.

    container = Container.create_default()
    handler = container.resolve(RequestHandler)
    handler.navigate({"input": "从北京西站到天安门", "mapProvider": "amap"})
"""

__version__ = "0.1.0"
