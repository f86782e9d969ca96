import pytest

from haconf import ConfigFile

SAMPLE = """\
global
\tmaxconn 50000
\tdaemon
\tstats socket /var/run/haproxy.stat mode 777
defaults
\tstats enable
\toption httpchk HEAD /haproxy?monitor HTTP/1.0
\ttimeout check 5s
listen s 0.0.0.0:80
\tmonitor-uri /haproxy?monitor
\tserver 10.0.0.1:80 10.0.0.1:80 maxconn 25 check inter 5s rise 3 fall 2
\tacl servers_down nbsrv(servers) lt 1
listen s 0.0.0.0:443   # tls passthrough
\tmode tcp
\toption ssl-hello-chk
\tserver server1 10.0.0.2:443 maxconn 25 check inter 5s rise 18 fall 3
\tserver server2 10.0.0.3:443 maxconn 25 check inter 4s rise 8 fall 2
"""


@pytest.fixture
def sample_cfg(tmp_path):
    path = tmp_path / "haproxy.cfg"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


@pytest.fixture
def loaded(sample_cfg):
    cf = ConfigFile()
    cf.set_section_names("global", "defaults", "listen")
    cf.load_file(str(sample_cfg))
    return cf
